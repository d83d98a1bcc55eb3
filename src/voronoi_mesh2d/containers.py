from __future__ import annotations

import operator
from typing import Iterator, List, Tuple

import numpy as np


class PointsContainer:
    """
    Append-only, id-indexed storage for 2D points.
    Ids are insertion order starting at 0; clear() starts over at 0.
    Lookups outside [0, size) raise IndexError (negative ids included).
    """

    def __init__(self) -> None:
        self._points: List[Tuple[float, float]] = []

    def insert(self, point) -> int:
        p = np.asarray(point, dtype=np.float64).reshape(-1)
        if p.shape != (2,):
            raise ValueError("point must have exactly 2 coordinates")
        self._points.append((float(p[0]), float(p[1])))
        return len(self._points) - 1

    def element_at(self, point_id: int) -> np.ndarray:
        i = operator.index(point_id)
        if i < 0 or i >= len(self._points):
            raise IndexError(f"point id {i} out of range [0, {len(self._points)})")
        return np.array(self._points[i], dtype=np.float64)

    def size(self) -> int:
        return len(self._points)

    def clear(self) -> None:
        self._points.clear()

    def as_array(self) -> np.ndarray:
        if not self._points:
            return np.zeros((0, 2), dtype=np.float64)
        return np.array(self._points, dtype=np.float64)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[np.ndarray]:
        # snapshot: appends after this call are not seen
        return iter([np.array(p, dtype=np.float64) for p in self._points])
