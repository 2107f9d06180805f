"""
Visualizer state module.
Owns the node tree, search term, label filters and view settings of one session.
"""

import logging
import threading
from typing import List, Iterable, Optional
from nodescope.models.kubernetes import Node, LabelIndex, LabelFilters
from nodescope.visualizer.filters import build_label_index, filter_nodes

logger = logging.getLogger(__name__)

POLL_INTERVALS = (0, 5, 10, 30, 60)


class VisualizerState:
    """
    Single owner of the dashboard state.

    Fetches are sequenced: each one takes a request id from begin_request()
    and its result is only applied if no newer request was issued meanwhile.
    """

    def __init__(self, nodes: Optional[Iterable[Node]] = None, search_term: str = "",
                 label_filters: Optional[LabelFilters] = None,
                 detailed_view: bool = False, poll_interval: int = 0):
        self._lock = threading.Lock()
        self.nodes: List[Node] = []
        self.label_index: LabelIndex = {}
        self.search_term = search_term
        self.label_filters: LabelFilters = {}
        self.detailed_view = detailed_view
        self.poll_interval = 0
        self._latest_request = 0
        self._applied_request = 0

        self.set_poll_interval(poll_interval)
        for key, values in (label_filters or {}).items():
            self.set_label_filter(key, values)
        self.replace_nodes(nodes or [])

    def replace_nodes(self, nodes: Iterable[Node]):
        """Swap in a new tree wholesale and rebuild the label index."""
        nodes = list(nodes)
        with self._lock:
            self.nodes = nodes
            self.label_index = build_label_index(nodes)

    def set_search_term(self, search_term: str):
        self.search_term = search_term or ""

    def set_label_filter(self, key: str, values: Iterable[str]):
        """Replace the selected values for one label key (empty = no constraint)."""
        with self._lock:
            self.label_filters = {**self.label_filters, key: list(values)}

    def clear_filters(self):
        """Reset search term and every label filter."""
        with self._lock:
            self.search_term = ""
            self.label_filters = {}

    def set_detailed_view(self, detailed: bool):
        self.detailed_view = bool(detailed)

    def set_poll_interval(self, seconds: int):
        """
        Set the refresh interval.

        Raises:
            ValueError: if seconds is not one of POLL_INTERVALS
        """
        if seconds not in POLL_INTERVALS:
            raise ValueError(
                f"Invalid poll interval {seconds!r}, expected one of {POLL_INTERVALS}"
            )
        self.poll_interval = seconds

    def visible_nodes(self) -> List[Node]:
        """Nodes and pods passing the current search term and label filters."""
        with self._lock:
            nodes, term, filters = self.nodes, self.search_term, self.label_filters
        return filter_nodes(nodes, term, filters)

    def begin_request(self) -> int:
        """Register a new fetch and return its request id."""
        with self._lock:
            self._latest_request += 1
            return self._latest_request

    def apply_response(self, request_id: int, nodes: Iterable[Node]) -> bool:
        """
        Apply the result of a fetch started with begin_request().

        Returns:
            bool: True if the tree was replaced, False if the response was stale
        """
        nodes = list(nodes)
        with self._lock:
            if request_id != self._latest_request or request_id <= self._applied_request:
                logger.debug(
                    f"Discarding stale response {request_id} (latest {self._latest_request})"
                )
                return False
            self._applied_request = request_id
            self.nodes = nodes
            self.label_index = build_label_index(nodes)
        return True
