import pytest

from graphcore.containers import EdgeMapContainer, EdgeVectorContainer
from graphcore.edge import Edge, EdgeType
from graphcore.node import NO_UID, Node


def test_default_constructor():
    n = Node()
    assert n.uid == 2**64 - 1
    assert n.uid == NO_UID
    assert n.data is None


def test_uid_constructor():
    n = Node(42)
    assert n.uid == 42


def test_equality_operator():
    n1 = Node(1)
    n2 = Node(1)
    n3 = Node(2)
    assert n1 == n2
    assert not (n1 == n3)


def test_hash_follows_uid():
    assert len({Node(1), Node(1), Node(2)}) == 2


def test_data_is_kept():
    n = Node(3, data={"k": 1})
    assert n.data == {"k": 1}


def test_find_all_outgoing_edges():
    a = Node(1, outgoing_edges=EdgeVectorContainer())
    b = Node(2)
    e1 = Edge(a, b, {EdgeType.DIRECTED}, 1.0, uid=10)
    e2 = Edge(b, a, {EdgeType.DIRECTED}, 1.0, uid=11)
    a.find_all_outgoing_edges({10: e1, 11: e2})
    assert list(a.outgoing_edges) == [e1]


def test_find_all_incoming_edges_uses_incoming_container():
    a = Node(1, incoming_edges=EdgeMapContainer())
    b = Node(2)
    e1 = Edge(a, b, {EdgeType.DIRECTED}, uid=5)
    a.find_all_incoming_edges({5: e1})
    assert a.incoming_edges.get_edge(5) is e1


def test_missing_container_raises():
    with pytest.raises(ValueError):
        Node(1).find_all_outgoing_edges({})
    with pytest.raises(ValueError):
        Node(1).find_all_incoming_edges({})