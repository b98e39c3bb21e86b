"""Graph vertices."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from graphcore.containers import EdgeContainer
    from graphcore.edge import Edge

#: Identifier carried by a node that was never given one.
NO_UID = 2**64 - 1


@dataclass(eq=False)
class Node:
    """A vertex with an identifier, optional data and edge containers.

    Nodes compare and hash by ``uid`` alone.
    """

    uid: int = NO_UID
    data: Any = None
    outgoing_edges: EdgeContainer | None = None
    incoming_edges: EdgeContainer | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.uid == other.uid

    def __hash__(self) -> int:
        return hash(self.uid)

    def find_all_outgoing_edges(self, edge_list: Mapping[int, Edge]) -> None:
        """Collect the edges of ``edge_list`` that start at this node."""
        if self.outgoing_edges is None:
            raise ValueError(f"node {self.uid} has no outgoing edge container")
        self.outgoing_edges.find_all_outgoing_edges(edge_list, self)

    def find_all_incoming_edges(self, edge_list: Mapping[int, Edge]) -> None:
        """Collect edges of ``edge_list`` into the incoming container.

        The selection rule is the container's: edges starting at this node.
        """
        if self.incoming_edges is None:
            raise ValueError(f"node {self.uid} has no incoming edge container")
        self.incoming_edges.find_all_outgoing_edges(edge_list, self)