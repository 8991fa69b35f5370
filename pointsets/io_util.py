import io
import logging
import math
import re
from typing import List, TextIO
from .point_set import PointSet
from .exceptions import PointSetFormatError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"

_INT_RE = re.compile(r"\+?[0-9]+")
_REAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse_int(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise PointSetFormatError(f"invalid header value '{token}'", token=token)
    try:
        return int(token)
    except ValueError as e:
        raise PointSetFormatError(f"header value '{token[:20]}...' is too long", token=token) from e


def _parse_real(token: str, row: int, col: int) -> float:
    value = float(token) if _REAL_RE.fullmatch(token) else math.nan
    if not math.isfinite(value):
        raise PointSetFormatError(
            f"invalid coordinate '{token}' at row {row}-idx, column {col}",
            row=row, column=col, token=token)
    return value


def _split(line: str) -> List[str]:
    return line.strip().split()


class IOUtil:
    @staticmethod
    def read_points_from_stream(stream: TextIO) -> PointSet:
        """Read a point set from a text stream.

        The first line holds two integers, the number of points n and the
        dimension d. Each of the next n lines holds the d coordinates of one
        point, separated by whitespace. The three points (0,0), (2,3), (4,5)
        are stored as:

            3 2
            0 0
            2 3
            4 5

        Raises PointSetFormatError on a missing line, a wrong token count or
        a token that is not a number. The stream is not closed.
        """
        line = stream.readline()
        if not line:
            raise PointSetFormatError("can't find header")
        tokens = _split(line)
        if len(tokens) != 2:
            raise PointSetFormatError(
                f"invalid header: expecting 2 values instead of {len(tokens)}",
                expected=2, actual=len(tokens))

        n = _parse_int(tokens[0])
        d = _parse_int(tokens[1])
        logger.debug("Reading %d points of dimension %d", n, d)
        try:
            pts = PointSet(d, n)
        except (ValueError, OverflowError, MemoryError) as e:
            raise PointSetFormatError(
                f"header size {n} x {d} is out of range", token=" ".join(tokens)) from e

        for i in range(n):
            line = stream.readline()
            if not line:
                raise PointSetFormatError(f"can't find {i}-idx row", row=i)
            tokens = _split(line)
            if len(tokens) != d:
                raise PointSetFormatError(
                    f"expecting {d} dimension instead of {len(tokens)} at row {i}-idx",
                    row=i, expected=d, actual=len(tokens))

            for j, token in enumerate(tokens):
                pts.set(i, j, _parse_real(token, i, j))

        logger.debug("Read %r", pts)
        return pts

    @staticmethod
    def read_points_from_string(text: str) -> PointSet:
        """Read a point set from an in-memory string"""
        return IOUtil.read_points_from_stream(io.StringIO(text))

    @staticmethod
    def read_points(fname: str) -> PointSet:
        """Read a point set from a UTF-8 file"""
        try:
            with open(fname, 'r', encoding=DEFAULT_ENCODING) as f:
                return IOUtil.read_points_from_stream(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Cannot open file {fname} for reading")
