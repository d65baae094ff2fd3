from __future__ import annotations

from topology_graph.models import Edge, GraphSnapshot, Node, NodeType
from topology_state.diff import compute_diff


def _node(node_id: str, node_type: str = NodeType.HOST.value, parent: str = "") -> Node:
    return Node(id=node_id, type=node_type, immediate_parent_id=parent, label=node_id)


def _snapshot(node_ids: list[str], edge_keys: list[str] | None = None) -> GraphSnapshot:
    return GraphSnapshot(
        nodes={f"key-{node_id}": _node(node_id) for node_id in node_ids},
        edges={key: Edge(source="a", target="b") for key in edge_keys or []},
    )


def _ids(nodes: list[Node]) -> set[str]:
    return {node.id for node in nodes}


def test_first_snapshot_is_all_adds() -> None:
    snap = _snapshot(["h1", "h2"], ["e1"])
    diff = compute_diff(snap)

    assert _ids(diff.nodes_diff.add) == {"h1", "h2"}
    assert diff.nodes_diff.remove == []
    assert diff.nodes_diff.update == []
    assert len(diff.edges_diff.add) == 1
    assert diff.edges_diff.remove == []
    assert diff.edges_diff.update == []


def test_same_snapshot_is_all_updates() -> None:
    snap = _snapshot(["h1", "h2"], ["e1", "e2"])
    diff = compute_diff(snap, snap)

    assert diff.nodes_diff.add == []
    assert diff.nodes_diff.remove == []
    assert _ids(diff.nodes_diff.update) == {"h1", "h2"}
    assert diff.edges_diff.add == []
    assert diff.edges_diff.remove == []
    assert len(diff.edges_diff.update) == 2
    assert not diff.has_changes()


def test_every_node_id_lands_in_exactly_one_bucket() -> None:
    previous = _snapshot(["a", "b", "c"])
    current = _snapshot(["b", "c", "d", "e"])
    diff = compute_diff(current, previous)

    assert _ids(diff.nodes_diff.add) == {"d", "e"}
    assert _ids(diff.nodes_diff.remove) == {"a"}
    assert _ids(diff.nodes_diff.update) == {"b", "c"}

    buckets = [diff.nodes_diff.add, diff.nodes_diff.remove, diff.nodes_diff.update]
    all_ids = [node.id for bucket in buckets for node in bucket]
    assert sorted(all_ids) == ["a", "b", "c", "d", "e"]


def test_update_carries_previous_node() -> None:
    previous = GraphSnapshot(nodes={"x": Node(id="h1", type="host", label="old")})
    current = GraphSnapshot(nodes={"x": Node(id="h1", type="host", label="new")})
    diff = compute_diff(current, previous)

    assert len(diff.nodes_diff.update) == 1
    assert diff.nodes_diff.update[0].label == "old"


def test_nodes_are_matched_on_id_not_map_key() -> None:
    previous = GraphSnapshot(nodes={"old-key": _node("h1")})
    current = GraphSnapshot(nodes={"new-key": _node("h1")})
    diff = compute_diff(current, previous)

    assert diff.nodes_diff.add == []
    assert diff.nodes_diff.remove == []
    assert _ids(diff.nodes_diff.update) == {"h1"}


def test_nodes_without_id_never_appear() -> None:
    previous = GraphSnapshot(nodes={"k1": _node("h1"), "anon-1": _node("")})
    current = GraphSnapshot(nodes={"k2": _node("h2"), "anon-2": _node("")})
    diff = compute_diff(current, previous)

    for bucket in (diff.nodes_diff.add, diff.nodes_diff.remove, diff.nodes_diff.update):
        assert all(node.id for node in bucket)
    assert _ids(diff.nodes_diff.add) == {"h2"}
    assert _ids(diff.nodes_diff.remove) == {"h1"}


def test_edges_are_matched_on_map_key() -> None:
    previous = GraphSnapshot(edges={"e1": Edge("a", "b"), "e2": Edge("b", "c")})
    current = GraphSnapshot(edges={"e2": Edge("x", "y"), "e3": Edge("c", "d"), "": Edge("d", "e")})
    diff = compute_diff(current, previous)

    assert diff.edges_diff.remove == [Edge("a", "b")]
    # the previous value is reported for surviving keys
    assert diff.edges_diff.update == [Edge("b", "c")]
    assert diff.edges_diff.add == [Edge("c", "d"), Edge("d", "e")]


def test_summary_counts_buckets() -> None:
    diff = compute_diff(_snapshot(["b", "c"], ["e1"]), _snapshot(["a", "b"]))
    assert diff.summary() == "nodes: +1 -1 ~1, edges: +1 -0 ~0"
    assert diff.has_changes()
    assert not diff.nodes_diff.is_empty()


def test_first_snapshot_includes_nodes_without_id() -> None:
    anon = Node(id="", type=NodeType.PSEUDO.value)
    host = _node("h1")
    diff = compute_diff(GraphSnapshot(nodes={"k": anon, "h": host}))

    assert diff.nodes_diff.add == [anon, host]
    assert diff.nodes_diff.remove == []
    assert diff.nodes_diff.update == []


def test_change_sets_hold_nodes_and_edges() -> None:
    previous = GraphSnapshot(nodes={"a": _node("a")}, edges={"e1": Edge("a", "b")})
    current = GraphSnapshot(nodes={"b": _node("b")}, edges={"e2": Edge("b", "c")})
    diff = compute_diff(current, previous)

    nodes = diff.nodes_diff.add + diff.nodes_diff.remove + diff.nodes_diff.update
    edges = diff.edges_diff.add + diff.edges_diff.remove + diff.edges_diff.update
    assert nodes and all(isinstance(node, Node) for node in nodes)
    assert edges and all(isinstance(edge, Edge) for edge in edges)
