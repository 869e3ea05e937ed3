"""Polydissolve - Coverage dissolve for edge-matched polygons.

This library removes the edges shared between adjacent polygons and
reassembles the remaining outline into polygons with correctly nested
holes, using Shapely for the geometry primitives.
"""


# Dissolve pipeline
from .dissolve import (
    dissolve_coverage,
    dissolve_to_multipolygon,
    find_shared_segments,
)

# Boundary segment cancellation
from .segments import BoundarySegmentSet

# Ring nesting
from .assemble import add_interior_ring, assemble_polygons

# Core types (enums, config, segments)
from .core import (
    SharedEdgePolicy,
    OpenChainPolicy,
    DissolveConfig,
    Segment,
    canonical_segment,
)

# Core exceptions and warnings
from .core import (
    DissolveError,
    InvalidGeometryType,
    InvalidRingShape,
    OverSharedSegmentError,
    UnclosedChainError,
    DissolveWarning,
    SharedEdgeWarning,
)

__all__ = [

    # Dissolve
    'dissolve_coverage',
    'dissolve_to_multipolygon',
    'find_shared_segments',

    # Segments
    'BoundarySegmentSet',
    'Segment',
    'canonical_segment',

    # Assembly
    'add_interior_ring',
    'assemble_polygons',

    # Core types
    'SharedEdgePolicy',
    'OpenChainPolicy',
    'DissolveConfig',

    # Core exceptions
    'DissolveError',
    'InvalidGeometryType',
    'InvalidRingShape',
    'OverSharedSegmentError',
    'UnclosedChainError',
    'DissolveWarning',
    'SharedEdgeWarning',
]
