"""Boundary segment cancellation.

Every ring of every input polygon is broken into segments. A segment that is
seen once survives as outline; a segment seen a second time is an edge shared
by two adjacent polygons and cancels. After all input has been processed the
surviving (unique) segments trace the outline of the union of the coverage.

The cancellation assumes that no segment is shared by more than two rings.
A third occurrence would re-insert the segment and produce an incorrect
result; this is not checked unless a ``SharedEdgePolicy`` other than
``IGNORE`` is selected.
"""

import warnings
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import shapely
from shapely.geometry import LineString, MultiLineString
from shapely.geometry.base import BaseGeometry
from shapely.ops import linemerge

from .core.config import DissolveConfig
from .core.errors import OverSharedSegmentError, SharedEdgeWarning
from .core.geometry_utils import iter_polygons, ring_coordinates
from .core.segment import Segment, SegmentKey, canonical_segment
from .core.types import SharedEdgePolicy, coerce_enum


class BoundarySegmentSet:
    """Collect polygon edges and cancel the ones shared between two rings.

    Args:
        geometries: Optional Polygons/MultiPolygons to add immediately
        retain_duplicates: If True, cancelled segments are kept and returned
            by :meth:`duplicate_segments`
        shared_edge_policy: What to do when a segment occurs in more than two
            rings (enum or string literal)

    Examples:
        >>> a = Polygon([(0, 0), (2, 0), (2, 2), (0, 2)])
        >>> b = Polygon([(2, 0), (4, 0), (4, 2), (2, 2)])
        >>> segments = BoundarySegmentSet([a, b], retain_duplicates=True)
        >>> segments.duplicate_segments()
        [Segment(start=(2.0, 0.0), end=(2.0, 2.0))]
        >>> [line.is_closed for line in segments.unique_merged()]
        [True]
    """

    def __init__(
        self,
        geometries: Optional[Iterable[BaseGeometry]] = None,
        retain_duplicates: bool = False,
        shared_edge_policy: Union[SharedEdgePolicy, str] = SharedEdgePolicy.IGNORE,
    ):
        self.retain_duplicates = bool(retain_duplicates)
        self.shared_edge_policy = coerce_enum(shared_edge_policy, SharedEdgePolicy)

        # Seen-once segments, in insertion order
        self._unique: Dict[SegmentKey, Segment] = {}
        self._duplicates: List[Segment] = []
        # Only populated when the shared-edge guard is active
        self._occurrences: Dict[SegmentKey, int] = {}
        self._over_shared: List[Tuple[Segment, int]] = []

        if geometries is not None:
            self._extend(geometries, stacklevel=2)

    @classmethod
    def from_config(
        cls,
        config: DissolveConfig,
        geometries: Optional[Iterable[BaseGeometry]] = None,
    ) -> "BoundarySegmentSet":
        """Create a segment set using the settings of a :class:`DissolveConfig`."""
        segments = cls(
            retain_duplicates=config.retain_duplicates,
            shared_edge_policy=config.shared_edge_policy,
        )
        if geometries is not None:
            segments._extend(geometries, stacklevel=2)
        return segments

    def __len__(self) -> int:
        return len(self._unique)

    @property
    def num_duplicates(self) -> int:
        return len(self._duplicates)

    def add_all(self, geometries: Iterable[BaseGeometry]) -> "BoundarySegmentSet":
        """Add every Polygon or MultiPolygon in ``geometries``.

        All inputs are type-checked before any segment is processed, so an
        InvalidGeometryType leaves the set unchanged.

        Raises:
            InvalidGeometryType: If any element is not a Polygon or MultiPolygon
        """
        self._extend(geometries, stacklevel=2)
        return self

    def add_geometry(self, geometry: BaseGeometry) -> "BoundarySegmentSet":
        """Extract the segments of a Polygon or MultiPolygon.

        Rings are walked exterior first, then each interior ring. Zero-length
        segments from repeated vertices are skipped.

        Raises:
            InvalidGeometryType: If geometry is not a Polygon or MultiPolygon
        """
        self._extend([geometry], stacklevel=2)
        return self

    def _extend(self, geometries: Iterable[BaseGeometry], stacklevel: int) -> None:
        polygons = [polygon for geometry in geometries for polygon in iter_polygons(geometry)]
        for polygon in polygons:
            for coords in ring_coordinates(polygon):
                for a, b in zip(coords[:-1], coords[1:]):
                    if a[0] == b[0] and a[1] == b[1]:
                        continue
                    self._process(canonical_segment(a, b))
        self._warn_over_shared(stacklevel + 1)

    def process_segment(self, segment: Union[Segment, Sequence[Sequence[float]]]) -> bool:
        """Insert a segment, or cancel it if it has been seen once already.

        Args:
            segment: A Segment or a pair of coordinates, in either order

        Returns:
            True if the segment is now in the unique set, False if it cancelled

        Raises:
            OverSharedSegmentError: If the segment has already been seen twice
                and ``shared_edge_policy`` is RAISE. The set is left unchanged.
        """
        start, end = segment
        inserted = self._process(canonical_segment(start, end))
        self._warn_over_shared(2)
        return inserted

    def _process(self, segment: Segment) -> bool:
        key = segment.key

        if self.shared_edge_policy is not SharedEdgePolicy.IGNORE:
            count = self._occurrences.get(key, 0) + 1
            if count > 2:
                if self.shared_edge_policy is SharedEdgePolicy.RAISE:
                    raise OverSharedSegmentError(segment, count)
                self._over_shared.append((segment, count))
            self._occurrences[key] = count

        if key in self._unique:
            del self._unique[key]
            if self.retain_duplicates:
                self._duplicates.append(segment)
            return False

        self._unique[key] = segment
        return True

    def _warn_over_shared(self, stacklevel: int) -> None:
        """Issue queued SharedEdgeWarnings against the caller ``stacklevel`` frames up."""
        pending, self._over_shared = self._over_shared, []
        for segment, count in pending:
            warnings.warn(
                f"Segment {segment.start} -> {segment.end} appears in {count} rings; "
                "boundary cancellation assumes at most two",
                SharedEdgeWarning,
                stacklevel=stacklevel + 1,
            )

    def unique_segments(self) -> List[Segment]:
        """Segments seen exactly once (modulo cancellation), in insertion order."""
        return list(self._unique.values())

    def duplicate_segments(self) -> List[Segment]:
        """Segments that cancelled. Always empty unless ``retain_duplicates`` is set."""
        return list(self._duplicates)

    def unique_as_lines(self) -> List[LineString]:
        """One two-point LineString per unique segment."""
        return [segment.to_linestring() for segment in self._unique.values()]

    def unique_multilinestring(self) -> MultiLineString:
        """All unique segments as a single MultiLineString."""
        return MultiLineString(self.unique_as_lines())

    def unique_merged(self) -> List[LineString]:
        """Join unique segments that share exact endpoints into maximal chains.

        Chains are joined only through nodes where exactly two segments meet,
        so the result may contain open chains as well as closed rings.
        Order among the returned chains is unspecified.

        Returns:
            List of LineStrings, each either open or closed
        """
        lines = self.unique_as_lines()
        if not lines:
            return []
        merged = linemerge(lines)
        return [line for line in shapely.get_parts(merged) if not line.is_empty]


__all__ = ['BoundarySegmentSet']
