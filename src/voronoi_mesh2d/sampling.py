import numpy as np


def sample_seeds_in_boundary(
    size,
    *,
    origin=(0.0, 0.0),
    n_points: int | None = None,
    target_area: float | None = None,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Uniform random seeds inside [origin, origin+size].
    Either n_points, or target_area (count = area / target_area, at least 1).
    """
    sx, sy = map(float, size)
    ox, oy = map(float, origin)

    if n_points is None:
        if target_area is None:
            raise ValueError("Either target_area or n_points required")
        if target_area <= 0:
            raise ValueError("target_area must be > 0")
        n_points = max(1, int((sx * sy) / float(target_area)))

    n = int(n_points)
    if n < 0:
        raise ValueError("n_points must be >= 0")

    pts = np.empty((n, 2), dtype=np.float64)
    pts[:, 0] = ox + rng.random(n) * sx
    pts[:, 1] = oy + rng.random(n) * sy
    return pts
