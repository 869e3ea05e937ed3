"""Type definitions for polydissolve operations.

This module defines enums for policy parameters throughout the library.
"""

from enum import Enum
from typing import Type, TypeVar, Union


class SharedEdgePolicy(Enum):
    """What to do when a segment is seen in more than two rings.

    Boundary cancellation relies on every shared edge belonging to exactly
    two rings. A third occurrence re-inserts the segment into the unique set
    and silently corrupts the unique/duplicate split.

    Attributes:
        IGNORE: Do not check (default, fastest)
        WARN: Emit a SharedEdgeWarning for every extra occurrence
        RAISE: Raise OverSharedSegmentError on the first extra occurrence

    Examples:
        >>> from polydissolve import BoundarySegmentSet, SharedEdgePolicy
        >>> segments = BoundarySegmentSet(shared_edge_policy=SharedEdgePolicy.RAISE)
    """
    IGNORE = 'ignore'
    WARN = 'warn'
    RAISE = 'raise'


class OpenChainPolicy(Enum):
    """What to do with merged boundary chains that do not close into rings.

    Attributes:
        SKIP: Drop the chain and emit a DissolveWarning (default)
        RAISE: Raise UnclosedChainError

    Examples:
        >>> from polydissolve import dissolve_coverage, DissolveConfig, OpenChainPolicy
        >>> config = DissolveConfig(open_chain_policy=OpenChainPolicy.RAISE)
        >>> result = dissolve_coverage(polygons, config=config)
    """
    SKIP = 'skip'
    RAISE = 'raise'


E = TypeVar('E', bound=Enum)


def coerce_enum(value: Union[E, str], enum_cls: Type[E]) -> E:
    """Return ``value`` as a member of ``enum_cls``.

    Accepts either an enum member or the string value of one.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.lower())
        except ValueError:
            pass
    valid = ", ".join(repr(member.value) for member in enum_cls)
    raise ValueError(f"Unknown {enum_cls.__name__}: {value!r} (expected one of {valid})")


__all__ = [
    'SharedEdgePolicy',
    'OpenChainPolicy',
    'coerce_enum',
]
