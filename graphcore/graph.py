"""Graphs as collections of nodes and edges."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from graphcore.edge import Edge
from graphcore.node import Node


class GraphTrait(enum.Enum):
    """Properties a graph may have."""

    UNDETERMINED = enum.auto()
    DIRECTED = enum.auto()
    UNDIRECTED = enum.auto()
    WEIGHTED = enum.auto()
    UNWEIGHTED = enum.auto()
    CYCLIC = enum.auto()
    ACYCLIC = enum.auto()
    CONNECTED = enum.auto()
    DISCONNECTED = enum.auto()
    EMPTY = enum.auto()


class Graph:
    """Nodes and edges keyed by their identifiers.

    A graph built with no arguments carries the EMPTY trait.
    """

    def __init__(
        self,
        nodes: Iterable[Node] | None = None,
        edges: Iterable[Edge] | None = None,
    ) -> None:
        self.traits: set[GraphTrait] = set()
        self.nodes: dict[int, Node] = {}
        self.edges: dict[int, Edge] = {}
        if nodes is None and edges is None:
            self.traits.add(GraphTrait.EMPTY)
        for node in nodes or ():
            self.nodes.setdefault(node.uid, node)
        for edge in edges or ():
            self.edges.setdefault(edge.uid, edge)

    def add_node(self, node: Node) -> None:
        """Insert ``node`` unless a node with its uid is present."""
        self.nodes.setdefault(node.uid, node)
        self.traits.discard(GraphTrait.EMPTY)

    def add_edge(self, edge: Edge) -> None:
        """Insert ``edge`` unless an edge with its uid is present."""
        self.edges.setdefault(edge.uid, edge)
        self.traits.discard(GraphTrait.EMPTY)

    def remove_node(self, node: Node | int) -> None:
        """Remove a node, given by object or uid, with its incident edges."""
        uid = node.uid if isinstance(node, Node) else node
        if isinstance(node, Node):
            if self.nodes.get(uid) is not node:
                return
        removed = self.nodes.pop(uid, None)
        if removed is None:
            return
        self.edges = {
            key: edge
            for key, edge in self.edges.items()
            if edge.source is not removed and edge.target is not removed
        }
        self._mark_if_empty()

    def remove_edge(self, edge: Edge | int) -> None:
        """Remove an edge given by object or uid; absent edges are ignored."""
        if isinstance(edge, Edge):
            if self.edges.get(edge.uid) is edge:
                del self.edges[edge.uid]
        else:
            self.edges.pop(edge, None)
        self._mark_if_empty()

    def has_trait(self, trait: GraphTrait) -> bool:
        """Return whether the graph carries ``trait``."""
        return trait in self.traits

    def copy(self) -> Graph:
        """Return a graph sharing the nodes and edges but not the mappings."""
        duplicate = Graph([], [])
        duplicate.traits = set(self.traits)
        duplicate.nodes = dict(self.nodes)
        duplicate.edges = dict(self.edges)
        return duplicate

    def _mark_if_empty(self) -> None:
        if not self.nodes and not self.edges:
            self.traits.add(GraphTrait.EMPTY)