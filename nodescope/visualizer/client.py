"""
NodeScope API client module.
Fetches the aggregated node view over HTTP.
"""

import logging
from typing import List
import requests
from requests.exceptions import RequestException
from pydantic import TypeAdapter, ValidationError
from nodescope.core.exceptions import FetchFailed
from nodescope.models.kubernetes import Node

logger = logging.getLogger(__name__)

NODES_PATH = "/api/kubernetes"

_node_list = TypeAdapter(List[Node])


class NodeScopeClient:
    """HTTP client for the aggregation endpoint."""

    def __init__(self, api_url, timeout=10, session=None):
        """
        Initialize the client.

        Args:
            api_url: Base URL of the NodeScope API, e.g. http://localhost:8000
            timeout: Request timeout in seconds
            session: Optional requests.Session (a new one is created if not provided)
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_nodes(self) -> List[Node]:
        """
        Fetch the current node view.

        Returns:
            List[Node]: Nodes with their pods

        Raises:
            FetchFailed: on network errors, non-2xx responses or invalid bodies
        """
        url = f"{self.api_url}{NODES_PATH}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return _node_list.validate_python(response.json())
        except RequestException as e:
            raise FetchFailed(f"Request to {url} failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise FetchFailed(f"Invalid response from {url}: {e}") from e

    def close(self):
        self.session.close()
