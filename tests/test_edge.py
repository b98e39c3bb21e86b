import pytest

from graphcore.edge import Edge, EdgeTraits, EdgeType
from graphcore.node import NO_UID, Node


def test_construction_and_traits():
    n1 = Node(1)
    n2 = Node(2)
    traits = EdgeTraits({EdgeType.DIRECTED})
    e = Edge(n1, n2, traits, 3.14)
    assert e.source.uid == 1
    assert e.target.uid == 2
    assert e.has_trait(EdgeType.DIRECTED)
    assert not e.has_trait(EdgeType.UNDIRECTED)
    assert e.weight == 3.14


def test_missing_endpoints_get_default_nodes():
    e = Edge(None, None, {EdgeType.UNWEIGHTED})
    assert e.source.uid == NO_UID
    assert e.target.uid == NO_UID
    assert e.source is not e.target


def test_plain_iterable_becomes_traits():
    e = Edge(Node(1), Node(2), [EdgeType.WEIGHTED, EdgeType.DIRECTED], 2)
    assert e.traits == EdgeTraits({EdgeType.DIRECTED, EdgeType.WEIGHTED})


def test_weight_may_be_none():
    e = Edge(Node(1), Node(2), {EdgeType.UNWEIGHTED})
    assert e.weight is None


@pytest.mark.parametrize("bad", ["1", [1], True])
def test_invalid_weight(bad):
    with pytest.raises(TypeError):
        Edge(Node(1), Node(2), {EdgeType.WEIGHTED}, bad)


def test_edges_compare_by_identity():
    a, b = Node(1), Node(2)
    e1 = Edge(a, b, {EdgeType.DIRECTED}, 1.0)
    e2 = Edge(a, b, {EdgeType.DIRECTED}, 1.0)
    assert e1 == e1
    assert not (e1 == e2)