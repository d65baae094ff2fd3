from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from . import models


class WireModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class SummaryValue(BaseModel):
    # producers attach arbitrary display attributes next to the known fields
    model_config = ConfigDict(extra="allow")

    def extra_fields(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class NodeSummaryValue(SummaryValue):
    id: str | None = None
    label: str | None = None
    type: str | None = None
    immediate_parent_id: str | None = None

    @classmethod
    def from_domain(cls, node: models.Node) -> "NodeSummaryValue":
        return cls.model_validate(
            {
                **node.metadata,
                "id": node.id,
                "label": node.label,
                "type": node.type,
                "immediate_parent_id": node.immediate_parent_id,
            }
        )

    def to_domain(self) -> models.Node:
        return models.Node(
            id=self.id or "",
            type=self.type or "",
            immediate_parent_id=self.immediate_parent_id or "",
            label=self.label or "",
            metadata=self.extra_fields(),
        )


class ConnectionSummaryValue(SummaryValue):
    source: str | None = None
    target: str | None = None

    @classmethod
    def from_domain(cls, edge: models.Edge) -> "ConnectionSummaryValue":
        return cls.model_validate({**edge.metadata, "source": edge.source, "target": edge.target})

    def to_domain(self) -> models.Edge:
        return models.Edge(
            source=self.source or "",
            target=self.target or "",
            metadata=self.extra_fields(),
        )


class GraphResultValue(WireModel):
    nodes: dict[str, NodeSummaryValue]
    edges: dict[str, ConnectionSummaryValue]

    @classmethod
    def from_domain(cls, snapshot: models.GraphSnapshot) -> "GraphResultValue":
        return cls(
            nodes={key: NodeSummaryValue.from_domain(node) for key, node in snapshot.nodes.items()},
            edges={key: ConnectionSummaryValue.from_domain(edge) for key, edge in snapshot.edges.items()},
        )

    def to_domain(self) -> models.GraphSnapshot:
        return models.GraphSnapshot(
            nodes={key: item.to_domain() for key, item in self.nodes.items()},
            edges={key: item.to_domain() for key, item in self.edges.items()},
        )


class TopologyFiltersValue(WireModel):
    cloud_filter: list[str] = Field(default_factory=list)
    region_filter: list[str] = Field(default_factory=list)
    kubernetes_filter: list[str] = Field(default_factory=list)
    host_filter: list[str] = Field(default_factory=list)
    pod_filter: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, filters: models.FilterState) -> "TopologyFiltersValue":
        return cls(**filters.to_payload())

    def to_domain(self) -> models.FilterState:
        return models.FilterState(**self.model_dump())
