"""Common geometry manipulation utilities.

Helpers for taking polygon input apart into rings and for coercing
ring-like linework into the shapes the assembler works with.
"""

from typing import Iterator, List
import numpy as np
from shapely.geometry import LinearRing, LineString, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from .errors import InvalidGeometryType, InvalidRingShape


def iter_polygons(geometry: BaseGeometry) -> Iterator[Polygon]:
    """Yield every polygon of a Polygon or MultiPolygon.

    Args:
        geometry: Polygon or MultiPolygon

    Yields:
        The polygon itself, or each member of the MultiPolygon

    Raises:
        InvalidGeometryType: If geometry is neither a Polygon nor a MultiPolygon
    """
    if isinstance(geometry, Polygon):
        yield geometry
    elif isinstance(geometry, MultiPolygon):
        yield from geometry.geoms
    else:
        raise InvalidGeometryType(geometry)


def ring_coordinates(polygon: Polygon) -> List[np.ndarray]:
    """Return coordinate arrays for the exterior ring, then each interior ring.

    Empty polygons yield an empty list.

    Examples:
        >>> poly = Polygon(shell, [hole])
        >>> [len(c) for c in ring_coordinates(poly)]
        [5, 5]
    """
    if polygon.is_empty:
        return []
    rings = [np.asarray(polygon.exterior.coords)]
    rings.extend(np.asarray(interior.coords) for interior in polygon.interiors)
    return rings


def as_linear_ring(geometry: BaseGeometry) -> LinearRing:
    """Coerce ring-like geometry into a LinearRing.

    Accepts a LinearRing, a closed LineString, or a Polygon with no
    interior rings (its exterior is used). The ring must have at least
    three distinct vertices.

    Raises:
        InvalidRingShape: For any other input, including empty or
            degenerate rings such as an A-B-A chain
    """
    if isinstance(geometry, LinearRing):
        _check_ring_coordinates(geometry.coords, geometry)
        return geometry
    if isinstance(geometry, LineString):
        if not geometry.is_closed or geometry.is_empty:
            raise InvalidRingShape(geometry, "LineString must be closed to be used as a ring")
        _check_ring_coordinates(geometry.coords, geometry)
        return LinearRing(geometry.coords)
    if isinstance(geometry, Polygon):
        if len(geometry.interiors) != 0 or geometry.is_empty:
            raise InvalidRingShape(geometry)
        _check_ring_coordinates(geometry.exterior.coords, geometry)
        return LinearRing(geometry.exterior.coords)
    raise InvalidRingShape(geometry)


def _check_ring_coordinates(coords, geometry: BaseGeometry) -> None:
    """Raise InvalidRingShape unless ``coords`` closes around three or more distinct vertices."""
    coords = list(coords)
    distinct = {tuple(c[:2]) for c in coords[:-1]}
    if len(coords) < 4 or len(distinct) < 3:
        raise InvalidRingShape(
            geometry,
            f"Ring needs at least 3 distinct vertices, got {len(distinct)}",
        )


def as_shell_polygon(geometry: BaseGeometry) -> Polygon:
    """Return a polygon for the assembler.

    Hole-free polygons pass through unchanged; LinearRings and closed
    LineStrings become shell-only polygons.

    Raises:
        InvalidRingShape: For polygons with holes, empty or degenerate rings,
            or non-ring linework
    """
    if isinstance(geometry, Polygon):
        as_linear_ring(geometry)
        return geometry
    return Polygon(as_linear_ring(geometry))


__all__ = [
    'iter_polygons',
    'ring_coordinates',
    'as_linear_ring',
    'as_shell_polygon',
]
