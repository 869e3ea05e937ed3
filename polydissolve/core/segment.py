"""Canonical undirected segments.

A ring edge traversed in either direction must map to the same value so that
the two rings sharing it can cancel each other. Segments are therefore stored
with their endpoints sorted lexicographically by (x, y).
"""

from typing import NamedTuple, Sequence, Tuple

from shapely.geometry import LineString

Coordinate = Tuple[float, ...]
SegmentKey = Tuple[Tuple[float, float], Tuple[float, float]]


def as_coordinate(point: Sequence[float]) -> Coordinate:
    """Return ``point`` as a plain tuple of floats (2D or 3D)."""
    return tuple(float(value) for value in point)


class Segment(NamedTuple):
    """An undirected edge with its endpoints in canonical order."""

    start: Coordinate
    end: Coordinate

    @property
    def key(self) -> SegmentKey:
        """Planar identity of the segment; Z does not take part in matching."""
        return (self.start[0], self.start[1]), (self.end[0], self.end[1])

    @property
    def is_degenerate(self) -> bool:
        """True when both endpoints coincide in the plane."""
        return self.start[:2] == self.end[:2]

    def to_linestring(self) -> LineString:
        return LineString([self.start, self.end])


def canonical_segment(a: Sequence[float], b: Sequence[float]) -> Segment:
    """Build the canonical segment joining ``a`` and ``b``.

    The result does not depend on argument order:

        >>> canonical_segment((2, 2), (2, 0)) == canonical_segment((2, 0), (2, 2))
        True
    """
    a = as_coordinate(a)
    b = as_coordinate(b)
    if (b[:2], b) < (a[:2], a):
        a, b = b, a
    return Segment(a, b)


__all__ = [
    'Coordinate',
    'Segment',
    'SegmentKey',
    'as_coordinate',
    'canonical_segment',
]
