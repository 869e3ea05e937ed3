"""Configuration for coverage dissolves."""

from dataclasses import dataclass
from typing import Union

from .types import OpenChainPolicy, SharedEdgePolicy, coerce_enum


@dataclass
class DissolveConfig:
    """Settings shared by the segment set and the dissolve pipeline.

    Attributes:
        retain_duplicates: Keep cancelled (shared) segments so they can be
            retrieved with ``duplicate_segments()``
        shared_edge_policy: How to react to a segment seen in more than two rings
        open_chain_policy: How to react to merged linework that is not closed
    """

    retain_duplicates: bool = False
    shared_edge_policy: Union[SharedEdgePolicy, str] = SharedEdgePolicy.IGNORE
    open_chain_policy: Union[OpenChainPolicy, str] = OpenChainPolicy.SKIP

    def __post_init__(self):
        self.retain_duplicates = bool(self.retain_duplicates)
        self.shared_edge_policy = coerce_enum(self.shared_edge_policy, SharedEdgePolicy)
        self.open_chain_policy = coerce_enum(self.open_chain_policy, OpenChainPolicy)


__all__ = ['DissolveConfig']
