"""Core types and utilities for polydissolve.

This module provides enums, configuration, exceptions and the canonical
segment type used throughout the library.
"""

from .types import (
    SharedEdgePolicy,
    OpenChainPolicy,
    coerce_enum,
)

from .config import DissolveConfig

from .errors import (
    DissolveError,
    InvalidGeometryType,
    InvalidRingShape,
    OverSharedSegmentError,
    UnclosedChainError,
    DissolveWarning,
    SharedEdgeWarning,
)

from .segment import Segment, canonical_segment

__all__ = [
    # Policy enums
    'SharedEdgePolicy',
    'OpenChainPolicy',
    'coerce_enum',

    # Configuration
    'DissolveConfig',

    # Exceptions and warnings
    'DissolveError',
    'InvalidGeometryType',
    'InvalidRingShape',
    'OverSharedSegmentError',
    'UnclosedChainError',
    'DissolveWarning',
    'SharedEdgeWarning',

    # Segments
    'Segment',
    'canonical_segment',
]
