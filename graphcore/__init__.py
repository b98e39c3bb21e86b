"""Core data structures for graphs: nodes, edges, edge containers and graphs."""

__version__ = "0.1.0"
__all__ = ["cli", "containers", "edge", "graph", "node"]