"""Spatial indexing and envelope utilities used by the assembler."""

from typing import List, Sequence
import numpy as np
import shapely
from shapely.geometry.base import BaseGeometry
from shapely.strtree import STRtree


def envelope_scan_order(geometries: Sequence[BaseGeometry]) -> List[int]:
    """Order geometries so containers come before anything they contain.

    Sorts by ascending envelope minimum X. A geometry nested in another has
    an envelope minimum X greater than or equal to its container's, and an
    envelope area no larger, so ties on minimum X are broken by descending
    envelope area. The sort is stable: remaining ties keep input order.

    Args:
        geometries: Geometries to order

    Returns:
        Indices into ``geometries`` in scan order

    Examples:
        >>> inner = Polygon([(2, 2), (3, 2), (3, 3), (2, 3)])
        >>> outer = Polygon([(0, 0), (9, 0), (9, 9), (0, 9)])
        >>> envelope_scan_order([inner, outer])
        [1, 0]
    """
    if len(geometries) == 0:
        return []

    bounds = shapely.bounds(np.asarray(geometries, dtype=object))
    min_x = bounds[:, 0]
    areas = (bounds[:, 2] - bounds[:, 0]) * (bounds[:, 3] - bounds[:, 1])

    # lexsort uses the last key as primary
    return np.lexsort((-areas, min_x)).tolist()


def envelopes_intersect(a: BaseGeometry, b: BaseGeometry) -> bool:
    """Test whether the bounding boxes of two geometries intersect (touching counts)."""
    ax, ay, aX, aY = a.bounds
    bx, by, bX, bY = b.bounds
    return ax <= bX and bx <= aX and ay <= bY and by <= aY


def build_envelope_index(geometries: Sequence[BaseGeometry]) -> STRtree:
    """Build an STRtree over ``geometries``.

    ``tree.query(geom)`` returns the indices of every geometry whose envelope
    intersects the envelope of ``geom``.
    """
    return STRtree(list(geometries))


__all__ = [
    'envelope_scan_order',
    'envelopes_intersect',
    'build_envelope_index',
]
