from __future__ import annotations
import operator
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class VoronoiEdge2D:
    """
    One Voronoi boundary segment.
    left/right are vertex ids, left_id/right_id the two seeds it separates,
    line_id the entry in the mesh line list holding that seed pair.
    """
    left: int
    right: int
    left_id: int
    right_id: int
    line_id: int


@dataclass
class PolygonRegion:
    """
    Polygon boundary of one seed's cell, stored as a loop of vertex ids.
    The order of point_ids is the winding order.
    """
    point_ids: List[int] = field(default_factory=list)
    edges: List[Tuple[int, int]] = field(default_factory=list)

    def add_point_id(self, vertex_id: int) -> None:
        self.point_ids.append(operator.index(vertex_id))

    def clear_points(self) -> None:
        self.point_ids.clear()
        self.edges.clear()

    def build_edges(self) -> None:
        """
        Rebuild edges from the current point loop:
        (p0,p1), (p1,p2), ..., (p[n-1],p0). Empty loop -> no edges.
        """
        pts = self.point_ids
        self.edges = [(pts[k], pts[k + 1]) for k in range(len(pts) - 1)]
        if pts:
            self.edges.append((pts[-1], pts[0]))

    def number_of_points(self) -> int:
        return len(self.point_ids)

    def number_of_edges(self) -> int:
        return len(self.edges)

    def get_edge(self, edge_index: int) -> Tuple[int, int]:
        i = operator.index(edge_index)
        if i < 0 or i >= len(self.edges):
            raise IndexError(f"region edge {i} out of range [0, {len(self.edges)})")
        return self.edges[i]
