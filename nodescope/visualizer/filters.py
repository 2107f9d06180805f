"""
Search and label filtering over the node view tree.
All functions are pure: they never modify the nodes they are given.
"""

from typing import List, Iterable
from nodescope.models.kubernetes import Node, Pod, LabelIndex, LabelFilters


def build_label_index(nodes: Iterable[Node]) -> LabelIndex:
    """
    Collect the distinct values of every label key across all pods.

    Values keep the order in which they were first seen, they are not sorted.
    """
    index = {}
    for node in nodes:
        for pod in node.pods:
            for key, value in pod.labels.items():
                values = index.setdefault(key, [])
                if value not in values:
                    values.append(value)
    return index


def matches_search(pod: Pod, search_term: str, node_name_matches: bool = False) -> bool:
    """
    Case-insensitive substring match on pod name or any label value.

    Args:
        pod: Pod to test
        search_term: Free text, empty matches everything
        node_name_matches: True when the parent node name already matched
    """
    if node_name_matches:
        return True
    term = search_term.lower()
    if term in pod.name.lower():
        return True
    return any(term in value.lower() for value in pod.labels.values())


def matches_label_filters(pod: Pod, label_filters: LabelFilters) -> bool:
    """AND across label keys, OR across the selected values of one key."""
    return all(
        not values or pod.labels.get(key) in values
        for key, values in label_filters.items()
    )


def filter_nodes(nodes: Iterable[Node], search_term: str = "",
                 label_filters: LabelFilters = None) -> List[Node]:
    """
    Compute the visible subset of the tree.

    A pod is visible when it passes the search and every label filter.
    Nodes without a visible pod are left out entirely.
    """
    label_filters = label_filters or {}
    term = search_term.lower()
    visible = []
    for node in nodes:
        node_name_matches = term in node.name.lower()
        pods = [
            pod for pod in node.pods
            if matches_search(pod, term, node_name_matches)
            and matches_label_filters(pod, label_filters)
        ]
        if pods:
            visible.append(node.model_copy(update={"pods": pods}))
    return visible
