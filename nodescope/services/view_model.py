"""
View-model mapping.
Turns raw kubernetes client objects (V1Node, V1Pod) into the Node -> Pod -> Container
tree served by the API. Every optional field falls back to a default, so mapping never fails.
"""

from typing import List, Optional, Iterable
from nodescope.models.kubernetes import (
    Node, Pod, Container, NodeStatus, PodStatus
)

UNKNOWN_IP = "Unknown"


def _name_of(obj) -> Optional[str]:
    metadata = getattr(obj, "metadata", None)
    return getattr(metadata, "name", None) if metadata else None


def _condition_is_true(conditions: Optional[Iterable], condition_type: str) -> bool:
    """True if a condition of the given type reports status "True"."""
    return any(
        getattr(condition, "type", None) == condition_type
        and getattr(condition, "status", None) == "True"
        for condition in conditions or []
    )


def resolve_node_ip(node) -> str:
    """First InternalIP address reported by the node, or "Unknown"."""
    status = getattr(node, "status", None)
    for address in getattr(status, "addresses", None) or []:
        if getattr(address, "type", None) == "InternalIP":
            return getattr(address, "address", None) or UNKNOWN_IP
    return UNKNOWN_IP


def resolve_node_status(node) -> NodeStatus:
    """Ready only when the Ready condition is "True"; a missing condition means NotReady."""
    status = getattr(node, "status", None)
    for condition in getattr(status, "conditions", None) or []:
        if getattr(condition, "type", None) == "Ready":
            return NodeStatus.READY if condition.status == "True" else NodeStatus.NOT_READY
    return NodeStatus.NOT_READY


def resolve_pod_status(pod) -> PodStatus:
    """
    Derive the dashboard status of a pod.

    Priority order, first match wins:
        1. deletion timestamp set -> Terminating
        2. phase Pending -> Pending, Failed -> Failed,
           Running -> Ready if the Ready condition is "True", otherwise Pending
        3. anything else (including no phase) -> Pending
    """
    metadata = getattr(pod, "metadata", None)
    if metadata is not None and getattr(metadata, "deletion_timestamp", None):
        return PodStatus.TERMINATING

    status = getattr(pod, "status", None)
    phase = getattr(status, "phase", None)
    if phase == "Pending":
        return PodStatus.PENDING
    if phase == "Failed":
        return PodStatus.FAILED
    if phase == "Running":
        if _condition_is_true(getattr(status, "conditions", None), "Ready"):
            return PodStatus.READY
        return PodStatus.PENDING
    return PodStatus.PENDING


def build_pod_view(pod) -> Pod:
    """Map a single V1Pod into a Pod view."""
    metadata = getattr(pod, "metadata", None)
    spec = getattr(pod, "spec", None)
    return Pod(
        name=_name_of(pod) or "",
        containers=[
            Container(name=getattr(container, "name", None) or "")
            for container in getattr(spec, "containers", None) or []
        ],
        annotations=dict(getattr(metadata, "annotations", None) or {}),
        labels=dict(getattr(metadata, "labels", None) or {}),
        status=resolve_pod_status(pod),
    )


def build_node_views(raw_nodes: Iterable, raw_pods: Iterable) -> List[Node]:
    """
    Join pods to their nodes and build the view tree.

    Args:
        raw_nodes: V1Node items, in list order
        raw_pods: V1Pod items across all namespaces, in list order

    Returns:
        List[Node]: one entry per node; pods whose node is not listed are dropped
    """
    raw_pods = list(raw_pods)
    result = []
    for node in raw_nodes:
        node_name = _name_of(node)
        node_pods = [
            pod for pod in raw_pods
            if getattr(getattr(pod, "spec", None), "node_name", None) == node_name
        ] if node_name else []

        result.append(Node(
            name=node_name or "",
            ip=resolve_node_ip(node),
            status=resolve_node_status(node),
            pods=[build_pod_view(pod) for pod in node_pods],
        ))
    return result
