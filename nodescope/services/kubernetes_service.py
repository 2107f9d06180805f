from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException
from typing import List, Optional, NamedTuple, Any
from functools import lru_cache
import logging
from nodescope.core.config import settings
from nodescope.core.exceptions import ClusterUnavailable, AggregationFailed
from nodescope.models.kubernetes import Node
from nodescope.services.view_model import build_node_views

logger = logging.getLogger(__name__)


class ClusterSnapshot(NamedTuple):
    """Raw list results from one refresh"""
    nodes: List[Any]
    pods: List[Any]


class KubernetesService:
    """Read-only access to cluster nodes and pods"""

    def __init__(self, kubeconfig_path: Optional[str] = None, context: Optional[str] = None):
        self.kubeconfig_path = kubeconfig_path
        self.context = context
        self._core_v1 = None

    def _load_config(self):
        """Load kubeconfig, falling back to the in-cluster service account"""
        try:
            config.load_kube_config(config_file=self.kubeconfig_path, context=self.context)
            logger.info(f"Loaded kubeconfig (context: {self.context or 'current'})")
        except (ConfigException, OSError) as e:
            logger.info(f"kubeconfig not usable ({e}), trying in-cluster config")
            try:
                config.load_incluster_config()
            except ConfigException as incluster_error:
                raise ClusterUnavailable(
                    f"Failed to load cluster configuration: {incluster_error}"
                ) from incluster_error

    def _api(self) -> client.CoreV1Api:
        if self._core_v1 is None:
            self._load_config()
            self._core_v1 = client.CoreV1Api()
        return self._core_v1

    def read_cluster(self) -> ClusterSnapshot:
        """
        List all nodes, then all pods across namespaces.

        The two calls are sequential, so the pod list can be slightly newer
        than the node list. Either call failing fails the whole read.
        """
        api = self._api()
        try:
            nodes = api.list_node()
            pods = api.list_pod_for_all_namespaces(watch=False)
        except Exception as e:
            raise ClusterUnavailable(f"Failed to list nodes and pods: {e}") from e
        return ClusterSnapshot(nodes=list(nodes.items or []), pods=list(pods.items or []))

    def get_node_views(self) -> List[Node]:
        """Read the cluster and map it into the node view tree"""
        try:
            snapshot = self.read_cluster()
            return build_node_views(snapshot.nodes, snapshot.pods)
        except Exception as e:
            logger.error(f"Error fetching Kubernetes data: {e}")
            raise AggregationFailed() from e


@lru_cache()
def get_kubernetes_service() -> KubernetesService:
    """Shared service instance, injected into routes"""
    return KubernetesService(
        kubeconfig_path=settings.kubeconfig_path,
        context=settings.kube_context,
    )
