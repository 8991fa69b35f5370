import logging
import math
import numpy as np
from typing import Protocol
from .point_set import PointSet
from .exceptions import PointSetError

logger = logging.getLogger(__name__)

WIGGLE = 1e-2
MAX_REDRAWS = 1000


class UniformSource(Protocol):
    def random(self) -> float: ...


class RandUtil:
    @staticmethod
    def random_point_set(d: int, n: int, rng: UniformSource, on_boundary: bool = False) -> PointSet:
        """Generate n random d-dimensional points.

        Coordinates are drawn uniformly from [-1, 1]. With on_boundary set, each
        point is scaled by 1/sqrt(L) + WIGGLE * U (L its squared length, U one
        extra draw), which lands it on or just outside the unit sphere. That is
        the hard case for boundary detection in a miniball solver.

        rng only needs a random() method returning floats in [0, 1), e.g.
        numpy.random.Generator or random.Random. Zero-length draws in boundary
        mode are redrawn.
        """
        if d < 1:
            raise ValueError("Dimension must be at least 1")
        if n < 0:
            raise ValueError("Number of points must be non-negative")

        logger.debug("Generating %d points in dimension %d (on_boundary=%s)", n, d, on_boundary)
        pts = PointSet(d, n)

        for i in range(n):
            length_sq = RandUtil._draw_point(pts, i, rng)

            if on_boundary:
                redraws = 0
                while length_sq == 0.0:
                    redraws += 1
                    if redraws > MAX_REDRAWS:
                        raise PointSetError(
                            f"Random source produced {MAX_REDRAWS} zero-length draws for point {i}",
                            {"row": i})
                    logger.debug("Zero-length draw for point %d, redrawing", i)
                    length_sq = RandUtil._draw_point(pts, i, rng)

                scale = 1.0 / math.sqrt(length_sq) + WIGGLE * rng.random()
                for j in range(d):
                    pts.set(i, j, pts.get(i, j) * scale)

        return pts

    @staticmethod
    def _draw_point(pts: PointSet, i: int, rng: UniformSource) -> float:
        """Fill point i with coordinates in [-1, 1], return its squared length"""
        length_sq = 0.0
        for j in range(pts.dimension):
            v = 2.0 * rng.random() - 1.0
            pts.set(i, j, v)
            length_sq += v * v
        return length_sq

    @staticmethod
    def seeded_point_set(d: int, n: int, seed: int, on_boundary: bool = False) -> PointSet:
        """Reproducible point set from a fresh numpy Generator"""
        return RandUtil.random_point_set(d, n, np.random.default_rng(seed), on_boundary)
