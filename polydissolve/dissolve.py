"""Coverage dissolve: remove the edges shared between adjacent polygons.

This is the end-to-end pipeline:

1. Break every input ring into segments and cancel the shared ones
   (:class:`~polydissolve.segments.BoundarySegmentSet`)
2. Merge the surviving segments into maximal chains
3. Keep the chains that close into rings
4. Rebuild polygons with holes from the rings
   (:func:`~polydissolve.assemble.assemble_polygons`)

Unlike a general union this never computes intersections, so it is only
correct for edge-matched coverages: adjacent polygons must share vertices
exactly along their common boundary and must not overlap.
"""

import warnings
from typing import Iterable, List, Optional

from shapely.geometry import LineString, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from .assemble import assemble_polygons
from .core.config import DissolveConfig
from .core.errors import DissolveWarning, UnclosedChainError
from .core.types import OpenChainPolicy
from .segments import BoundarySegmentSet


def dissolve_coverage(
    geometries: Iterable[BaseGeometry],
    config: Optional[DissolveConfig] = None,
) -> List[Polygon]:
    """Dissolve a coverage of edge-matched polygons into its outline.

    Args:
        geometries: Polygons and/or MultiPolygons forming a coverage
        config: Dissolve settings (default: ``DissolveConfig()``)

    Returns:
        List of polygons. Order is unspecified.

    Raises:
        InvalidGeometryType: If an input is not a Polygon or MultiPolygon
        OverSharedSegmentError: If a segment occurs in more than two rings and
            ``config.shared_edge_policy`` is RAISE
        UnclosedChainError: If merged linework does not close and
            ``config.open_chain_policy`` is RAISE

    Examples:
        >>> a = Polygon([(0, 0), (2, 0), (2, 2), (0, 2)])
        >>> b = Polygon([(2, 0), (4, 0), (4, 2), (2, 2)])
        >>> result = dissolve_coverage([a, b])
        >>> len(result), result[0].area
        (1, 8.0)
    """
    if config is None:
        config = DissolveConfig()

    segments = BoundarySegmentSet.from_config(config, geometries)
    chains = segments.unique_merged()
    rings = _closed_rings(chains, config.open_chain_policy)
    return assemble_polygons(rings)


def dissolve_to_multipolygon(
    geometries: Iterable[BaseGeometry],
    config: Optional[DissolveConfig] = None,
) -> MultiPolygon:
    """Same as :func:`dissolve_coverage`, returned as a single MultiPolygon."""
    return MultiPolygon(dissolve_coverage(geometries, config=config))


def find_shared_segments(geometries: Iterable[BaseGeometry]) -> List[LineString]:
    """Return the edges shared between polygons of a coverage.

    Each shared edge is returned once, as a two-point LineString.
    """
    segments = BoundarySegmentSet(geometries, retain_duplicates=True)
    return [segment.to_linestring() for segment in segments.duplicate_segments()]


def _closed_rings(chains: List[LineString], policy: OpenChainPolicy) -> List[LineString]:
    """Filter merged chains down to closed rings, applying the open-chain policy."""
    rings = []
    open_count = 0
    for chain in chains:
        if chain.is_closed and len(chain.coords) >= 4:
            rings.append(chain)
            continue
        if policy is OpenChainPolicy.RAISE:
            raise UnclosedChainError(chain)
        open_count += 1

    if open_count:
        warnings.warn(
            f"Dropped {open_count} boundary chain(s) that did not close into rings; "
            "input may not be an edge-matched coverage",
            DissolveWarning,
            stacklevel=3,
        )
    return rings


__all__ = [
    'dissolve_coverage',
    'dissolve_to_multipolygon',
    'find_shared_segments',
]
