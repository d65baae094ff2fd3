from .models import (
    EXPANSION_RULES,
    ChangeSet,
    Edge,
    ExpansionRule,
    FilterState,
    GraphDiff,
    GraphSnapshot,
    Node,
    NodeType,
    expansion_rule,
)
from .wire_models import (
    ConnectionSummaryValue,
    GraphResultValue,
    NodeSummaryValue,
    TopologyFiltersValue,
)

__all__ = [
    "ChangeSet",
    "ConnectionSummaryValue",
    "EXPANSION_RULES",
    "Edge",
    "ExpansionRule",
    "FilterState",
    "GraphDiff",
    "GraphResultValue",
    "GraphSnapshot",
    "Node",
    "NodeSummaryValue",
    "NodeType",
    "TopologyFiltersValue",
    "expansion_rule",
]
