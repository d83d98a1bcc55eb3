import logging
from collections import defaultdict

import numpy as np
from scipy.spatial import Voronoi
from shapely.geometry import Polygon
from shapely.geometry.polygon import orient

from .datastructures import VoronoiEdge2D
from .geometry import bisector_halfplane, boundary_box, reflect_into_ghosts
from .mesh import VoronoiMesh2D

logger = logging.getLogger(__name__)


def _halfplane_cell(points: np.ndarray, k: int, candidates, frame):
    """
    Frame cut by the bisector half-planes between points[k] and each candidate.
    """
    cell = frame
    for j in candidates:
        if j == k:
            continue
        cell = cell.intersection(bisector_halfplane(points[k], points[j], frame.bounds))
        if cell.is_empty:
            break
    return cell


def build_voronoi_mesh(
    seeds,
    *,
    size,
    origin=(0.0, 0.0),
    mesh: VoronoiMesh2D | None = None,
    bounded: bool = True,
    reflection_diagonals: bool = True,
    weld_decimals: int = 6,
) -> VoronoiMesh2D:
    """
    Populate a VoronoiMesh2D for seeds clipped to the rectangle [origin, origin+size].

    Geometry comes from SciPy Voronoi; everything is written into the mesh
    only through its builder-facing mutators.

    - bounded=True mirrors ghost seeds (of seeds inside the rectangle) across
      its sides so cells come out finite; ghosts never enter the mesh.
    - bounded=False skips the ghosts.
    - any cell SciPy leaves infinite is rebuilt as the rectangle cut by the
      bisector half-planes of its Voronoi neighbors.
    - vertices are welded on coordinates rounded to weld_decimals.
    - a region edge shared by two seeds becomes one Edge; the first edge of a
      seed pair also records its Line and the neighbor pair.
    - coincident seeds: the lowest id owns the cell, later copies get an empty
      region and no adjacency. Seeds whose cell misses the rectangle likewise.
    """
    sx, sy = map(float, size)
    if sx <= 0 or sy <= 0:
        raise ValueError("size must be positive in both components")

    seeds = np.asarray(seeds, dtype=np.float64)
    if seeds.ndim != 2 or seeds.shape[1] != 2 or len(seeds) == 0:
        raise ValueError("seeds must be (N,2) with N >= 1")

    n_orig = len(seeds)

    if mesh is None:
        mesh = VoronoiMesh2D()

    # reset first: with reset_clears_seeds it would drop freshly loaded seeds
    mesh.reset()
    mesh.set_seeds(seeds)
    mesh.set_boundary((sx, sy))
    mesh.set_origin(origin)
    mesh.insert_cells()

    frame = boundary_box(origin, (sx, sy))

    def weld_key(pt2):
        return (round(float(pt2[0]), weld_decimals), round(float(pt2[1]), weld_decimals))

    # one Voronoi site per distinct position; slot = row in all_points
    owner = {}
    slot = {}
    unique_ids = []
    for i, p in enumerate(seeds):
        key = weld_key(p)
        if key not in owner:
            owner[key] = i
            slot[i] = len(unique_ids)
            unique_ids.append(i)
    real = seeds[unique_ids]

    all_points = real
    if bounded:
        minx, miny, maxx, maxy = frame.bounds
        inside = (
            (real[:, 0] >= minx) & (real[:, 0] <= maxx)
            & (real[:, 1] >= miny) & (real[:, 1] <= maxy)
        )
        # mirrors of outside seeds would land inside the frame
        ghosts = reflect_into_ghosts(real[inside], frame.bounds, include_diagonals=reflection_diagonals)

        # a seed on a side mirrors onto itself; Qhull must not see it twice
        occupied = set(owner)
        kept = []
        for g in ghosts:
            key = weld_key(g)
            if key not in occupied:
                occupied.add(key)
                kept.append(g)
        if kept:
            all_points = np.vstack([real, np.asarray(kept)])

    vor = Voronoi(all_points) if len(all_points) >= 3 else None

    ridge_neighbors = defaultdict(set)
    if vor is not None:
        for a, b in vor.ridge_points:
            ridge_neighbors[int(a)].add(int(b))
            ridge_neighbors[int(b)].add(int(a))

    def clip_cell(k):
        if vor is None:
            return _halfplane_cell(all_points, k, range(len(all_points)), frame)
        region_idx = int(vor.point_region[k])
        region = vor.regions[region_idx] if region_idx >= 0 else []
        if region and -1 not in region and len(region) >= 3:
            return Polygon(vor.vertices[region]).intersection(frame)
        candidates = sorted(ridge_neighbors[k]) or range(len(all_points))
        return _halfplane_cell(all_points, k, candidates, frame)

    vertex_map = {}

    def get_vertex_id(pt2):
        key = weld_key(pt2)
        if key not in vertex_map:
            vertex_map[key] = mesh.add_vertex(key)
        return vertex_map[key]

    # regions: clipped cell polygons, counter-clockwise
    edge_map = {}  # (va, vb) sorted -> [(seed, va, vb), ...]
    for i in range(n_orig):
        if i not in slot:
            mesh.clear_region(i)
            logger.warning("seed %d coincides with seed %d; region left empty", i, owner[weld_key(seeds[i])])
            continue

        clipped = clip_cell(slot[i])
        if clipped.geom_type == "MultiPolygon":
            clipped = max(clipped.geoms, key=lambda g: g.area)

        vidx = []
        if not clipped.is_empty and clipped.geom_type == "Polygon":
            clipped = orient(clipped, sign=1.0)
            for p in clipped.exterior.coords[:-1]:
                v = get_vertex_id(p)
                if not vidx or vidx[-1] != v:
                    vidx.append(v)
            if len(vidx) > 1 and vidx[0] == vidx[-1]:
                vidx.pop()

        if len(vidx) < 3:
            mesh.clear_region(i)
            logger.warning("seed %d has no usable cell inside the boundary; region left empty", i)
            continue

        for v in vidx:
            mesh.region_add_point_id(i, v)
        mesh.build_edge(i)

        for va, vb in mesh.get_cell(i).edges:
            edge_map.setdefault((min(va, vb), max(va, vb)), []).append((i, va, vb))

    # region edges shared by two seeds -> edge (+ line and neighbor pair once per seed pair)
    line_ids = {}
    for owners in edge_map.values():
        if len(owners) != 2 or owners[0][0] == owners[1][0]:
            continue
        (i, va, vb), (j, _, _) = owners

        pair = (i, j)
        if pair not in line_ids:
            line_ids[pair] = mesh.add_line(pair)
            mesh.add_cell_neighbor(i, j)
        mesh.add_edge(VoronoiEdge2D(left=va, right=vb, left_id=i, right_id=j, line_id=line_ids[pair]))

    logger.debug(
        "built voronoi mesh: %d seeds, %d vertices, %d edges",
        mesh.number_of_seeds, mesh.vertex_list_size(), mesh.edge_list_size(),
    )
    return mesh
