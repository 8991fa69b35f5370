"""Random and file-based point sets for minimum enclosing ball solvers."""

from .exceptions import PointSetError, PointSetFormatError
from .io_util import IOUtil
from .point_set import PointSet
from .rand_util import RandUtil

random_point_set = RandUtil.random_point_set
read_points_from_stream = IOUtil.read_points_from_stream
read_points = IOUtil.read_points

__all__ = [
    "PointSet",
    "PointSetError",
    "PointSetFormatError",
    "RandUtil",
    "IOUtil",
    "random_point_set",
    "read_points_from_stream",
    "read_points",
]
