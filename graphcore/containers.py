"""Containers holding the edges attached to a node."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping

from graphcore.edge import Edge
from graphcore.node import Node


class EdgeContainer(ABC):
    """Interface shared by the edge containers."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of edges held."""

    @abstractmethod
    def __iter__(self) -> Iterator[Edge]:
        """Iterate over the edges held."""

    @abstractmethod
    def add_edge(self, edge: Edge) -> None:
        """Store ``edge``."""

    @abstractmethod
    def get_edge(self, uid: int) -> Edge:
        """Look up an edge."""

    @abstractmethod
    def remove_edge(self, edge: Edge | int) -> None:
        """Remove an edge given by object or uid; absent edges are ignored."""

    @abstractmethod
    def find_all_outgoing_edges(self, edge_list: Mapping[int, Edge], node: Node) -> None:
        """Add every edge of ``edge_list`` whose source is ``node``."""


def _starting_at(edge_list: Mapping[int, Edge], node: Node) -> list[Edge]:
    return [edge for edge in edge_list.values() if edge.source is node]


class EdgeVectorContainer(EdgeContainer):
    """Edges kept in insertion order, looked up by position."""

    def __init__(self, edges: list[Edge] | None = None) -> None:
        self.outgoing_edges: list[Edge] = edges if edges is not None else []

    def __len__(self) -> int:
        return len(self.outgoing_edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.outgoing_edges)

    def add_edge(self, edge: Edge) -> None:
        self.outgoing_edges.append(edge)

    def get_edge(self, uid: int) -> Edge:
        """Return the edge at position ``uid``."""
        if 0 <= uid < len(self.outgoing_edges):
            return self.outgoing_edges[uid]
        raise IndexError("Index out of range")

    def remove_edge(self, edge: Edge | int) -> None:
        if edge is None:
            return
        if isinstance(edge, Edge):
            match = next((i for i, e in enumerate(self.outgoing_edges) if e is edge), None)
        else:
            match = next(
                (i for i, e in enumerate(self.outgoing_edges) if e.uid == edge), None
            )
        if match is not None:
            del self.outgoing_edges[match]

    def find_all_outgoing_edges(self, edge_list: Mapping[int, Edge], node: Node) -> None:
        self.outgoing_edges.extend(_starting_at(edge_list, node))


class EdgeMapContainer(EdgeContainer):
    """Edges keyed by uid; adding an existing uid keeps the first edge."""

    def __init__(self, edges: dict[int, Edge] | None = None) -> None:
        self.outgoing_edges: dict[int, Edge] = edges if edges is not None else {}

    def __len__(self) -> int:
        return len(self.outgoing_edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.outgoing_edges.values())

    def add_edge(self, edge: Edge) -> None:
        self.outgoing_edges.setdefault(edge.uid, edge)

    def get_edge(self, uid: int) -> Edge:
        """Return the edge with identifier ``uid``."""
        try:
            return self.outgoing_edges[uid]
        except KeyError:
            raise KeyError("Edge not found") from None

    def remove_edge(self, edge: Edge | int) -> None:
        if edge is None:
            return
        if isinstance(edge, Edge):
            key = next((k for k, e in self.outgoing_edges.items() if e is edge), None)
            if key is not None:
                del self.outgoing_edges[key]
        else:
            self.outgoing_edges.pop(edge, None)

    def find_all_outgoing_edges(self, edge_list: Mapping[int, Edge], node: Node) -> None:
        for edge in _starting_at(edge_list, node):
            self.outgoing_edges.setdefault(edge.uid, edge)