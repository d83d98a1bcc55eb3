from __future__ import annotations

import logging
import operator
from typing import Iterator, List, Tuple

import numpy as np

from .containers import PointsContainer
from .datastructures import PolygonRegion, VoronoiEdge2D

logger = logging.getLogger(__name__)


def _check_id(kind: str, i: int, n: int) -> int:
    i = operator.index(i)
    if i < 0 or i >= n:
        raise IndexError(f"{kind} id {i} out of range [0, {n})")
    return i


class VoronoiMesh2D:
    """
    Topology store for a planar Voronoi diagram.

    Holds seeds, diagram vertices, lines (adjacent seed pairs), edges,
    one PolygonRegion per seed and per-seed neighbor lists. Everything
    cross-references by integer id into the owning list.

    Usage:
    - a builder calls set_seeds / set_boundary / set_origin, then insert_cells,
      then appends vertices, lines, edges, region point ids and neighbor pairs
    - consumers read it back through the get_* accessors and the iterators

    No geometry is computed here and nothing is validated beyond id ranges.
    """

    def __init__(self, *, reset_clears_seeds: bool = False, unique_neighbors: bool = False):
        self.reset_clears_seeds = bool(reset_clears_seeds)
        self.unique_neighbors = bool(unique_neighbors)

        self._seeds = np.zeros((0, 2), dtype=np.float64)
        self._number_of_seeds = 0
        self._boundary = np.zeros(2, dtype=np.float64)
        self._origin = np.zeros(2, dtype=np.float64)

        self._vertices = PointsContainer()
        self._lines: List[Tuple[int, int]] = []
        self._edges: List[VoronoiEdge2D] = []
        self._regions: List[PolygonRegion] = []
        self._neighbors: List[List[int]] = []

    # ------------------------------------------------------------------
    # seeds & boundary

    @property
    def number_of_seeds(self) -> int:
        return self._number_of_seeds

    @property
    def boundary(self) -> np.ndarray:
        return self._boundary.copy()

    @property
    def origin(self) -> np.ndarray:
        return self._origin.copy()

    def set_seeds(self, seeds) -> None:
        """
        Replace the seed set. Seed id == row index. Duplicates and degenerate
        layouts are accepted as-is.
        """
        S = np.array(seeds, dtype=np.float64)
        if S.size == 0:
            S = S.reshape(0, 2)
        if S.ndim != 2 or S.shape[1] != 2:
            raise ValueError("seeds must be (N,2)")
        self._seeds = S
        self._number_of_seeds = int(len(S))
        logger.debug("set %d seeds", self._number_of_seeds)

    def set_boundary(self, size) -> None:
        self._boundary = np.array(size, dtype=np.float64).reshape(2)

    def set_origin(self, origin) -> None:
        self._origin = np.array(origin, dtype=np.float64).reshape(2)

    def get_seed(self, seed_id: int) -> np.ndarray:
        i = _check_id("seed", seed_id, self._number_of_seeds)
        return self._seeds[i].copy()

    def seeds(self) -> Iterator[np.ndarray]:
        return iter(list(self._seeds.copy()))

    # ------------------------------------------------------------------
    # builder-facing mutators

    def insert_cells(self) -> None:
        """(Re)allocate one empty region and one empty neighbor list per seed."""
        n = self._number_of_seeds
        self._regions = [PolygonRegion() for _ in range(n)]
        self._neighbors = [[] for _ in range(n)]
        logger.debug("allocated %d regions", n)

    def add_vertex(self, point) -> int:
        return self._vertices.insert(point)

    def add_line(self, pair) -> int:
        a, b = pair
        self._lines.append((operator.index(a), operator.index(b)))
        return len(self._lines) - 1

    def add_edge(self, edge: VoronoiEdge2D) -> int:
        self._edges.append(edge)
        return len(self._edges) - 1

    def add_cell_neighbor(self, seed_a: int, seed_b: int) -> None:
        n = len(self._neighbors)
        a = _check_id("neighbor list", seed_a, n)
        b = _check_id("neighbor list", seed_b, n)
        if self.unique_neighbors and b in self._neighbors[a]:
            return
        self._neighbors[a].append(b)
        self._neighbors[b].append(a)

    def region_add_point_id(self, seed_id: int, vertex_id: int) -> None:
        self._region(seed_id).add_point_id(vertex_id)

    def build_edge(self, seed_id: int) -> None:
        self._region(seed_id).build_edges()

    def clear_region(self, seed_id: int) -> None:
        self._region(seed_id).clear_points()
        logger.debug("cleared region %d", seed_id)

    def reset(self) -> None:
        """
        Drop lines, edges and vertices. Seeds, boundary, regions and neighbor
        lists stay, unless reset_clears_seeds is set: then seeds go as well,
        together with regions and neighbor lists (they are sized by the seeds).
        """
        self.line_list_clear()
        self.edge_list_clear()
        self.vertex_list_clear()
        if self.reset_clears_seeds:
            self._seeds = np.zeros((0, 2), dtype=np.float64)
            self._number_of_seeds = 0
            self._regions = []
            self._neighbors = []
        logger.debug("reset mesh (seeds kept: %s)", not self.reset_clears_seeds)

    def line_list_clear(self) -> None:
        self._lines.clear()

    def edge_list_clear(self) -> None:
        self._edges.clear()

    def vertex_list_clear(self) -> None:
        self._vertices.clear()

    # ------------------------------------------------------------------
    # queries

    def line_list_size(self) -> int:
        return len(self._lines)

    def edge_list_size(self) -> int:
        return len(self._edges)

    def vertex_list_size(self) -> int:
        return self._vertices.size()

    def get_line(self, line_id: int) -> Tuple[int, int]:
        return self._lines[_check_id("line", line_id, len(self._lines))]

    def get_edge(self, edge_id: int) -> VoronoiEdge2D:
        return self._edges[_check_id("edge", edge_id, len(self._edges))]

    def get_vertex(self, vertex_id: int) -> np.ndarray:
        return self._vertices.element_at(vertex_id)

    get_point = get_vertex

    def get_edge_end(self, edge_id: int) -> Tuple[int, int]:
        e = self.get_edge(edge_id)
        return e.left_id, e.right_id

    def get_edge_line_id(self, edge_id: int) -> int:
        return self.get_edge(edge_id).line_id

    def get_seeds_id_around_edge(self, edge: VoronoiEdge2D) -> Tuple[int, int]:
        return self.get_line(edge.line_id)

    def get_cell(self, region_id: int) -> PolygonRegion:
        return self._region(region_id)

    def vertices(self) -> Iterator[np.ndarray]:
        return iter(self._vertices)

    def edges(self) -> Iterator[VoronoiEdge2D]:
        return iter(tuple(self._edges))

    def lines(self) -> Iterator[Tuple[int, int]]:
        return iter(tuple(self._lines))

    def neighbor_ids(self, seed_id: int) -> Iterator[int]:
        i = _check_id("neighbor list", seed_id, len(self._neighbors))
        return iter(tuple(self._neighbors[i]))

    def vertices_array(self) -> np.ndarray:
        return self._vertices.as_array()

    def region_polygon(self, seed_id: int) -> np.ndarray:
        """Vertex coordinates of a region in winding order, (K,2)."""
        ids = self._region(seed_id).point_ids
        if not ids:
            return np.zeros((0, 2), dtype=np.float64)
        return np.vstack([self._vertices.element_at(i) for i in ids])

    def _region(self, seed_id: int) -> PolygonRegion:
        return self._regions[_check_id("region", seed_id, len(self._regions))]

    def __repr__(self) -> str:
        return (
            f"VoronoiMesh2D(seeds={self._number_of_seeds}, vertices={self.vertex_list_size()}, "
            f"lines={self.line_list_size()}, edges={self.edge_list_size()}, "
            f"boundary={self._boundary.tolist()}, origin={self._origin.tolist()})"
        )
