import numpy as np
from typing import Iterator


class PointSet:
    """Fixed-shape container of `size` points with `dimension` coordinates each."""

    def __init__(self, dimension: int, size: int):
        if dimension < 0 or size < 0:
            raise ValueError("Dimension and size must be non-negative")
        self._coords = np.zeros((size, dimension), dtype=np.float64)

    @classmethod
    def create(cls, d: int, n: int) -> 'PointSet':
        return cls(d, n)

    @property
    def dimension(self) -> int:
        return self._coords.shape[1]

    @property
    def size(self) -> int:
        return self._coords.shape[0]

    def __len__(self):
        return self.size

    def _check(self, i, j):
        if i < 0 or i >= self.size:
            raise IndexError(f"Point index {i} out of bounds for {self.size} points")
        if j < 0 or j >= self.dimension:
            raise IndexError(f"Coordinate index {j} out of bounds for dimension {self.dimension}")

    def set(self, i: int, j: int, value: float) -> None:
        self._check(i, j)
        self._coords[i, j] = value

    def get(self, i: int, j: int) -> float:
        self._check(i, j)
        return float(self._coords[i, j])

    coord = get

    def point(self, i: int) -> np.ndarray:
        """Copy of point i as a 1-D array"""
        if i < 0 or i >= self.size:
            raise IndexError(f"Point index {i} out of bounds for {self.size} points")
        return self._coords[i].copy()

    def length(self, i: int) -> float:
        """Euclidean norm of point i"""
        return float(np.linalg.norm(self.point(i)))

    @property
    def coordinates(self) -> np.ndarray:
        view = self._coords.view()
        view.flags.writeable = False
        return view

    def __iter__(self) -> Iterator[np.ndarray]:
        for i in range(self.size):
            yield self._coords[i].copy()

    def __repr__(self):
        return f"PointSet(dimension={self.dimension}, size={self.size})"
