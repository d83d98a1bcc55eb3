from .containers import PointsContainer
from .datastructures import VoronoiEdge2D, PolygonRegion
from .mesh import VoronoiMesh2D
from .geometry import (
    boundary_box,
    signed_area,
    is_counter_clockwise,
    reflect_into_ghosts,
    bisector_halfplane,
)
from .sampling import sample_seeds_in_boundary
from .voronoi import build_voronoi_mesh

__all__ = [
    "PointsContainer",
    "VoronoiEdge2D",
    "PolygonRegion",
    "VoronoiMesh2D",
    "boundary_box",
    "signed_area",
    "is_counter_clockwise",
    "reflect_into_ghosts",
    "bisector_halfplane",
    "sample_seeds_in_boundary",
    "build_voronoi_mesh",
]
