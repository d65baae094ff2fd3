from __future__ import annotations

from topology_graph.models import ChangeSet, Edge, GraphDiff, GraphSnapshot, Node


def _diff_nodes(current: GraphSnapshot, previous: GraphSnapshot) -> ChangeSet[Node]:
    changes: ChangeSet[Node] = ChangeSet()
    nodes = current.identified_nodes()
    prev_nodes = previous.identified_nodes()

    for node_id, prev_node in prev_nodes.items():
        if node_id in nodes:
            changes.update.append(prev_node)
        else:
            changes.remove.append(prev_node)

    for node_id, node in nodes.items():
        if node_id not in prev_nodes:
            changes.add.append(node)
    return changes


def _diff_edges(current: GraphSnapshot, previous: GraphSnapshot) -> ChangeSet[Edge]:
    changes: ChangeSet[Edge] = ChangeSet()
    for key, prev_edge in previous.edges.items():
        if key in current.edges:
            changes.update.append(prev_edge)
        else:
            changes.remove.append(prev_edge)

    for key, edge in current.edges.items():
        if key not in previous.edges:
            changes.add.append(edge)
    return changes


def compute_diff(current: GraphSnapshot, previous: GraphSnapshot | None = None) -> GraphDiff:
    """Partition nodes and edges into added, removed and updated.

    Nodes are matched on their own `id`; nodes without one are ignored once
    there is a previous snapshot to compare against. Edges are matched on their
    map key. Updated entries carry the previous snapshot's values: they only
    tell the caller which already-rendered items still exist.
    """
    if previous is None:
        return GraphDiff(
            nodes_diff=ChangeSet(add=list(current.nodes.values())),
            edges_diff=ChangeSet(add=list(current.edges.values())),
        )

    return GraphDiff(
        nodes_diff=_diff_nodes(current, previous),
        edges_diff=_diff_edges(current, previous),
    )

