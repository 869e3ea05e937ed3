"""Exceptions and warnings raised by polydissolve."""

from typing import Optional


class DissolveError(Exception):
    """Base class for all polydissolve errors."""
    pass


class InvalidGeometryType(DissolveError, TypeError):
    """Raised when edge extraction receives something other than a Polygon or MultiPolygon."""

    def __init__(self, geometry: object, message: Optional[str] = None):
        self.geometry = geometry
        if message is None:
            kind = getattr(geometry, 'geom_type', type(geometry).__name__)
            message = f"Geometries must be Polygons or MultiPolygons, got {kind}"
        super().__init__(message)


class InvalidRingShape(DissolveError, ValueError):
    """Raised when a hole is not a LinearRing, closed LineString or hole-free Polygon."""

    def __init__(self, geometry: object, message: Optional[str] = None):
        self.geometry = geometry
        if message is None:
            kind = getattr(geometry, 'geom_type', type(geometry).__name__)
            message = (
                "Supplied ring geometry must be a LinearRing, closed LineString, "
                f"or a Polygon with no interior rings, got {kind}"
            )
        super().__init__(message)


class OverSharedSegmentError(DissolveError):
    """Raised when a segment is found in more than two rings."""

    def __init__(self, segment, occurrences: int):
        self.segment = segment
        self.occurrences = occurrences
        super().__init__(
            f"Segment {segment.start} -> {segment.end} appears in "
            f"{occurrences} rings; at most two are supported"
        )


class UnclosedChainError(DissolveError):
    """Raised when merged boundary linework does not close into a ring."""

    def __init__(self, chain):
        self.chain = chain
        coords = list(chain.coords)
        super().__init__(
            f"Boundary chain from {coords[0]} to {coords[-1]} is not closed"
        )


class DissolveWarning(UserWarning):
    """Issued when a dissolve drops or tolerates questionable input."""
    pass


class SharedEdgeWarning(DissolveWarning):
    """Issued when a segment is found in more than two rings."""
    pass


__all__ = [
    'DissolveError',
    'InvalidGeometryType',
    'InvalidRingShape',
    'OverSharedSegmentError',
    'UnclosedChainError',
    'DissolveWarning',
    'SharedEdgeWarning',
]
