# graphcore

Building blocks for graph work: nodes, typed edges, two interchangeable
edge containers and a graph that holds nodes and edges together.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Quick check

After installing, this command creates an empty graph and reports success:

```
graphcore
```

It prints `Graph object created (0 nodes, 0 edges).` and exits with status 0.
It takes no options besides `--help`.

## Usage

```python
from graphcore.node import Node
from graphcore.edge import Edge, EdgeTraits, EdgeType
from graphcore.containers import EdgeVectorContainer, EdgeMapContainer
from graphcore.graph import Graph, GraphTrait

a = Node(1)
b = Node(2)
edge = Edge(a, b, EdgeTraits({EdgeType.DIRECTED}), 1.0)
assert edge.has_trait(EdgeType.DIRECTED)

graph = Graph()
assert graph.has_trait(GraphTrait.EMPTY)
graph.add_node(a)
graph.add_node(b)
graph.add_edge(edge)
assert not graph.has_trait(GraphTrait.EMPTY)
```

### Nodes (`graphcore.node`)

A `Node` has a `uid`, optional `data`, and optional `outgoing_edges` and
`incoming_edges` containers. Two nodes are equal, and hash alike, when their
ids are equal. A node made without an id gets `NO_UID` (2**64 - 1) as a
"no id" marker.

`find_all_outgoing_edges(edge_list)` and `find_all_incoming_edges(edge_list)`
hand a mapping of edges to the node's outgoing or incoming container, which
collects the edges that start at this node. Both raise `ValueError` when the
container is missing.

### Edges (`graphcore.edge`)

An `Edge` joins a `source` node to a `target` node, carries a `uid`
(default 0), an optional numeric `weight` (`None` for unweighted) and a set
of `EdgeType` traits (`DIRECTED`, `UNDIRECTED`, `WEIGHTED`, `UNWEIGHTED`)
held in an immutable `EdgeTraits`; any iterable of `EdgeType` is accepted
and wrapped. A missing endpoint is replaced by a fresh default `Node`. A
weight that is not an int or float (booleans included) raises `TypeError`.
Edges compare by identity. Check a trait with `has_trait`.

### Edge containers (`graphcore.containers`)

`EdgeContainer` is the shared abstract interface.

- `EdgeVectorContainer` keeps edges in insertion order; `get_edge(i)` returns
  the edge at position `i` or raises `IndexError`.
- `EdgeMapContainer` keys edges by their `uid`; adding an edge whose uid is
  already present keeps the first one. `get_edge(uid)` raises `KeyError`
  when nothing is stored under that id.

Both support `len()`, iteration, `add_edge`, `get_edge`, `remove_edge`
(by uid or by the edge object itself; absent edges are ignored) and
`find_all_outgoing_edges(edge_list, node)`, which adds every edge of the
mapping whose `source` is `node`.

### Graphs (`graphcore.graph`)

`Graph(nodes=None, edges=None)` holds `nodes` and `edges` as dictionaries
keyed by id, plus a set of `GraphTrait` values in `traits`. A graph built
with no arguments has the `EMPTY` trait; adding a node or an edge removes it,
and removals that leave the graph with no nodes and no edges add it back.
When an id is already present, the first node or edge stays.

- `add_node`, `add_edge`
- `remove_node(node_or_uid)` also drops every edge that starts or ends at
  the removed node
- `remove_edge(edge_or_uid)`
- `has_trait(trait)`
- `copy()` returns a new graph with its own mappings and trait set, sharing
  the node and edge objects

## What the package does not do

It provides data structures only: no graph algorithms (search, shortest
paths, cycle detection), no reading or writing of graphs from files, and no
working out of graph traits such as `DIRECTED` or `CYCLIC` from the nodes
and edges; `traits` records only `EMPTY` as described above.