"""Reassemble independent closed rings into polygons with holes.

The rings produced by a dissolve carry no information about which of them
are shells and which are holes. The assembler scans the rings in order of
their envelope minimum X, so that a container is always visited before the
rings it may contain, and attaches every ring fully contained by the current
polygon as a hole. Rings consumed as holes are not emitted on their own.

Holes are exactly one level deep: a ring lying inside a hole is not
contained by the polygon (it sits in the cavity) and is emitted as a
separate top-level polygon.
"""

from typing import Iterable, List

from shapely.geometry import LinearRing, Polygon
from shapely.geometry.base import BaseGeometry

from .core.geometry_utils import as_linear_ring, as_shell_polygon
from .core.spatial_utils import (
    build_envelope_index,
    envelope_scan_order,
    envelopes_intersect,
)


def add_interior_ring(polygon: Polygon, ring: BaseGeometry) -> Polygon:
    """Construct a new polygon with an additional interior ring.

    The shell and every existing hole of ``polygon`` are kept in order and
    ``ring`` is appended as the last hole. The input polygon is not modified.
    The result is not checked for validity; the caller is responsible for
    ensuring the hole lies inside the shell and crosses no other ring.

    Args:
        polygon: Polygon with zero or more interior rings
        ring: The new hole as a LinearRing, closed LineString, or a Polygon
            with no interior rings

    Returns:
        New Polygon with the additional interior ring

    Raises:
        InvalidRingShape: If ``ring`` is not ring-like

    Examples:
        >>> shell = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        >>> hole = LinearRing([(2, 2), (4, 2), (4, 4), (2, 4)])
        >>> len(add_interior_ring(shell, hole).interiors)
        1
    """
    hole = as_linear_ring(ring)
    shell = LinearRing(polygon.exterior.coords)
    holes = [LinearRing(interior.coords) for interior in polygon.interiors]
    holes.append(hole)
    return Polygon(shell, holes)


def assemble_polygons(rings: Iterable[BaseGeometry]) -> List[Polygon]:
    """Determine shell/hole relationships between closed rings.

    Each input is treated as a shell-only polygon. Rings are sorted by
    envelope minimum X (ties: larger envelope first), indexed with an
    STRtree, and scanned in that order. For each ring not yet consumed,
    later unconsumed rings whose envelopes intersect it and which it fully
    contains are attached as holes and marked consumed.

    Rings whose envelopes overlap without full containment are left as
    independent polygons.

    Args:
        rings: LinearRings, closed LineStrings, or Polygons

    Returns:
        List of polygons in scan order. Empty input gives an empty list.

    Raises:
        InvalidRingShape: If an input is not ring-like

    Examples:
        >>> outer = LinearRing([(0, 0), (10, 0), (10, 10), (0, 10)])
        >>> inner = LinearRing([(2, 2), (4, 2), (4, 4), (2, 4)])
        >>> result = assemble_polygons([inner, outer])
        >>> len(result), len(result[0].interiors)
        (1, 1)
    """
    polygons = [as_shell_polygon(ring) for ring in rings]
    if not polygons:
        return []

    order = envelope_scan_order(polygons)
    polygons = [polygons[i] for i in order]

    # Index positions match scan order
    tree = build_envelope_index(polygons)
    consumed = [False] * len(polygons)

    for i in range(len(polygons)):
        if consumed[i]:
            continue

        # Only rings later in scan order can be holes of this one, and the
        # outermost candidates must be tried first
        candidates = sorted(int(j) for j in tree.query(polygons[i]) if j > i)

        for j in candidates:
            if consumed[j]:
                continue
            if not envelopes_intersect(polygons[i], polygons[j]):
                continue
            if polygons[i].contains(polygons[j]):
                polygons[i] = add_interior_ring(polygons[i], polygons[j])
                consumed[j] = True

    return [poly for poly, used in zip(polygons, consumed) if not used]


__all__ = ['add_interior_ring', 'assemble_polygons']
