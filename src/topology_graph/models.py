from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar


class NodeType(str, Enum):
    """Node types of the topology graph.

    Hierarchy:
    - cloud_provider
      - cloud_region
        - host
      - kubernetes_cluster
        - host
    - host
      - pod
        - container
      - container
        - process
      - process

    pseudo groups nodes that have no place in the tree.
    """

    PSEUDO = "pseudo"
    CLOUD_PROVIDER = "cloud_provider"
    CLOUD_REGION = "cloud_region"
    KUBERNETES_CLUSTER = "kubernetes_cluster"
    HOST = "host"
    CONTAINER = "container"
    POD = "pod"
    PROCESS = "process"


@dataclass(slots=True)
class Node:
    id: str
    type: str
    immediate_parent_id: str = ""
    label: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Edge:
    source: str = ""
    target: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class GraphSnapshot:
    """One complete observation of the topology graph.

    `nodes` and `edges` keep the producer's map keys. Node identity for diffing
    and lookups is the node's own `id`, which may differ from its map key.
    """

    nodes: dict[str, Node] = field(default_factory=dict)
    edges: dict[str, Edge] = field(default_factory=dict)
    _index: dict[str, Node] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # nodes without an id are not first-class
        object.__setattr__(self, "_index", {node.id: node for node in self.nodes.values() if node.id})

    def identified_nodes(self) -> dict[str, Node]:
        return dict(self._index)

    def get_node(self, node_id: str) -> Node | None:
        if not node_id:
            return None
        return self._index.get(node_id)

    def children_of(self, parent_id: str, node_type: str) -> list[str]:
        return [
            node.id
            for node in self.nodes.values()
            if node.immediate_parent_id == parent_id and node.type == node_type and node.id
        ]


T = TypeVar("T", Node, Edge)


@dataclass(slots=True)
class ChangeSet(Generic[T]):
    add: list[T] = field(default_factory=list)
    remove: list[T] = field(default_factory=list)
    update: list[T] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.add and not self.remove and not self.update


@dataclass(slots=True)
class GraphDiff:
    nodes_diff: ChangeSet[Node] = field(default_factory=ChangeSet)
    edges_diff: ChangeSet[Edge] = field(default_factory=ChangeSet)

    def has_changes(self) -> bool:
        return bool(self.nodes_diff.add or self.nodes_diff.remove or self.edges_diff.add or self.edges_diff.remove)

    def summary(self) -> str:
        return (
            f"nodes: +{len(self.nodes_diff.add)} -{len(self.nodes_diff.remove)} ~{len(self.nodes_diff.update)}, "
            f"edges: +{len(self.edges_diff.add)} -{len(self.edges_diff.remove)} ~{len(self.edges_diff.update)}"
        )


@dataclass(slots=True, frozen=True)
class ExpansionRule:
    bucket: str
    child_types: tuple[NodeType, ...] = ()


# Expandable node types: the filter list each one lives in and the child types
# whose expansion is cascaded away when it collapses. Hosts and pods are the
# deepest expandable levels.
EXPANSION_RULES: dict[str, ExpansionRule] = {
    NodeType.CLOUD_PROVIDER.value: ExpansionRule(
        bucket="cloud_filter",
        child_types=(NodeType.CLOUD_REGION, NodeType.KUBERNETES_CLUSTER),
    ),
    NodeType.CLOUD_REGION.value: ExpansionRule(bucket="region_filter", child_types=(NodeType.HOST,)),
    NodeType.KUBERNETES_CLUSTER.value: ExpansionRule(bucket="kubernetes_filter", child_types=(NodeType.HOST,)),
    NodeType.HOST.value: ExpansionRule(bucket="host_filter"),
    NodeType.POD.value: ExpansionRule(bucket="pod_filter"),
}


def expansion_rule(node_type: str) -> ExpansionRule | None:
    if isinstance(node_type, NodeType):
        node_type = node_type.value
    return EXPANSION_RULES.get(node_type)


@dataclass(slots=True)
class FilterState:
    cloud_filter: list[str] = field(default_factory=list)
    region_filter: list[str] = field(default_factory=list)
    kubernetes_filter: list[str] = field(default_factory=list)
    host_filter: list[str] = field(default_factory=list)
    pod_filter: list[str] = field(default_factory=list)

    def bucket_for(self, node_type: str) -> list[str] | None:
        rule = expansion_rule(node_type)
        if rule is None:
            return None
        return getattr(self, rule.bucket)

    def contains(self, node_id: str, node_type: str) -> bool:
        bucket = self.bucket_for(node_type)
        return bucket is not None and node_id in bucket

    def to_payload(self) -> dict[str, list[str]]:
        return {
            "cloud_filter": list(self.cloud_filter),
            "region_filter": list(self.region_filter),
            "kubernetes_filter": list(self.kubernetes_filter),
            "host_filter": list(self.host_filter),
            "pod_filter": list(self.pod_filter),
        }
