import numpy as np
from shapely.geometry import Polygon, box


def boundary_box(origin, size):
    """
    Axis-aligned rectangle [origin, origin+size] as a shapely Polygon.
    """
    ox, oy = map(float, origin)
    sx, sy = map(float, size)
    return box(ox, oy, ox + sx, oy + sy)


def signed_area(points: np.ndarray) -> float:
    """
    Shoelace area of a closed loop (N,2), positive when counter-clockwise.
    """
    P = np.asarray(points, dtype=np.float64)
    if len(P) < 3:
        return 0.0
    x, y = P[:, 0], P[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def is_counter_clockwise(points: np.ndarray) -> bool:
    return signed_area(points) > 0.0


def bisector_halfplane(p, q, bounds):
    """
    Half-plane of points at least as close to p as to q, as a shapely Polygon
    large enough to cover the rectangle bounds (minx, miny, maxx, maxy).
    """
    p = np.asarray(p, dtype=np.float64)
    q = np.asarray(q, dtype=np.float64)
    d = q - p
    nn = float(np.linalg.norm(d))
    if nn < 1e-12:
        raise ValueError("coincident points have no bisector")
    n = d / nn
    t = np.array([-n[1], n[0]])
    m = 0.5 * (p + q)

    minx, miny, maxx, maxy = map(float, bounds)
    corners = np.array([[minx, miny], [maxx, miny], [maxx, maxy], [minx, maxy]])
    R = float(np.max(np.linalg.norm(corners - m, axis=1))) + 1.0

    # (x - m)·n <= 0 side
    ring = [m + t * R, m - t * R, m - t * R - n * R, m + t * R - n * R]
    return Polygon([tuple(c) for c in ring])


def reflect_into_ghosts(points: np.ndarray, bounds, include_diagonals: bool = True) -> np.ndarray:
    """
    Mirror points across the sides of bounds (minx, miny, maxx, maxy).
    8 tiles with diagonals, 4 without.
    """
    minx, miny, maxx, maxy = map(float, bounds)
    P = np.asarray(points, dtype=np.float64)

    fx = [
        lambda x: x,
        lambda x: 2 * minx - x,
        lambda x: 2 * maxx - x,
    ]
    fy = [
        lambda y: y,
        lambda y: 2 * miny - y,
        lambda y: 2 * maxy - y,
    ]

    ghosts = []
    for ix, fxi in enumerate(fx):
        for iy, fyi in enumerate(fy):
            if ix == 0 and iy == 0:
                continue
            if not include_diagonals and ix != 0 and iy != 0:
                continue
            ghosts.append(np.column_stack([fxi(P[:, 0]), fyi(P[:, 1])]))

    return np.vstack(ghosts) if ghosts else np.zeros((0, 2), dtype=np.float64)
