"""
Exceptions shared by the API and the visualizer.
"""


class NodeScopeError(Exception):
    """Base class for NodeScope errors."""


class ClusterUnavailable(NodeScopeError):
    """The control plane could not be queried (config, network, auth or API error)."""


class AggregationFailed(NodeScopeError):
    """Building the node view failed; the cause is logged, never returned to clients."""

    message = "Failed to fetch Kubernetes data"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class FetchFailed(NodeScopeError):
    """The visualizer could not fetch the node view from the API."""
