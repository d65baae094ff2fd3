from __future__ import annotations

import logging

from topology_graph.models import FilterState, GraphDiff, GraphSnapshot, expansion_rule

from .config import StateConfig, load_config
from .diff import compute_diff


class TopologyStateManager:
    """Keeps the two latest topology snapshots, their diff and the expanded-node filters."""

    def __init__(self, config: StateConfig | None = None) -> None:
        self._config = config or load_config()
        self._logger = logging.getLogger("topology-state")
        self._current: GraphSnapshot | None = None
        self._previous: GraphSnapshot | None = None
        self._diff: GraphDiff | None = None
        self._filters = FilterState()

    def get_current(self) -> GraphSnapshot | None:
        return self._current

    def get_previous(self) -> GraphSnapshot | None:
        return self._previous

    def get_diff(self) -> GraphDiff | None:
        return self._diff

    def get_filters(self) -> FilterState:
        return self._filters

    def ingest(self, snapshot: GraphSnapshot) -> GraphDiff:
        self._previous = self._current
        self._current = snapshot
        self._diff = compute_diff(self._current, self._previous)

        nodes_diff, edges_diff = self._diff.nodes_diff, self._diff.edges_diff
        log = self._logger.info if self._config.log_diff_summary else self._logger.debug
        log(
            "snapshot ingested nodes: +%d -%d ~%d, edges: +%d -%d ~%d",
            len(nodes_diff.add),
            len(nodes_diff.remove),
            len(nodes_diff.update),
            len(edges_diff.add),
            len(edges_diff.remove),
            len(edges_diff.update),
        )

        self._prune_filters(self._diff)
        return self._diff

    def _prune_filters(self, diff: GraphDiff) -> None:
        # Drop filters for nodes that no longer exist; collapse cascades to
        # whatever descendants are still present in the new snapshot.
        for node in diff.nodes_diff.remove:
            if not self.is_expanded(node.id, node.type):
                continue
            self._logger.debug("pruning filter for removed node id=%s type=%s", node.id, node.type)
            self.collapse(node.id, node.type)

    def expand(self, node_id: str, node_type: str) -> None:
        bucket = self._filters.bucket_for(node_type)
        if bucket is None or node_id in bucket:
            return
        bucket.append(node_id)
        self._logger.debug("expanded node id=%s type=%s", node_id, node_type)

    def collapse(self, node_id: str, node_type: str) -> None:
        rule = expansion_rule(node_type)
        bucket = self._filters.bucket_for(node_type)
        if rule is None or bucket is None or node_id not in bucket:
            return

        bucket.remove(node_id)
        self._logger.debug("collapsed node id=%s type=%s", node_id, node_type)

        if self._current is None:
            return
        for child_type in rule.child_types:
            for child_id in self._current.children_of(node_id, child_type):
                self.collapse(child_id, child_type)

    def is_expanded(self, node_id: str, node_type: str) -> bool:
        return self._filters.contains(node_id, node_type)
