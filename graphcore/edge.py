"""Graph edges and their traits."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from graphcore.node import Node

#: An edge weight: a number, or None for unweighted edges.
EdgeWeight = Union[float, int, None]


class EdgeType(enum.Enum):
    """Properties an edge may have."""

    UNDIRECTED = enum.auto()
    DIRECTED = enum.auto()
    WEIGHTED = enum.auto()
    UNWEIGHTED = enum.auto()


@dataclass(frozen=True)
class EdgeTraits:
    """An immutable set of edge properties."""

    types: frozenset[EdgeType]

    def __init__(self, types: Iterable[EdgeType]) -> None:
        object.__setattr__(self, "types", frozenset(types))

    def __contains__(self, trait: object) -> bool:
        return trait in self.types


@dataclass(eq=False)
class Edge:
    """A connection between two nodes.

    Missing endpoints are replaced by fresh default nodes. Edges compare
    by identity.
    """

    source: Node | None
    target: Node | None
    traits: EdgeTraits | Iterable[EdgeType]
    weight: EdgeWeight = None
    uid: int = 0
    _unused: None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.source is None:
            self.source = Node()
        if self.target is None:
            self.target = Node()
        if not isinstance(self.traits, EdgeTraits):
            self.traits = EdgeTraits(self.traits)
        if self.weight is not None and (
            isinstance(self.weight, bool) or not isinstance(self.weight, (int, float))
        ):
            raise TypeError(f"invalid edge weight: {self.weight!r}")

    def has_trait(self, trait: EdgeType) -> bool:
        """Return whether the edge carries ``trait``."""
        return trait in self.traits