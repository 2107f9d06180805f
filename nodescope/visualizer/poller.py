"""
Polling module.
Periodically fetches the node view from the NodeScope API and prints the filtered result.
"""

import logging
import threading
from nodescope.core.exceptions import FetchFailed
from nodescope.visualizer.client import NodeScopeClient
from nodescope.visualizer.config import Config
from nodescope.visualizer.render import render_text
from nodescope.visualizer.store import VisualizerState

logger = logging.getLogger(__name__)


class ClusterPoller:
    """Drives refreshes of a VisualizerState."""

    def __init__(self, config=None, client=None, state=None, output=print):
        """
        Initialize the poller.

        Args:
            config: Optional Config object (creates new one if not provided)
            client: Optional NodeScopeClient (created in initialize() if not provided)
            state: Optional VisualizerState (created in initialize() if not provided)
            output: Callable receiving the rendered text after every applied refresh
        """
        self.config = config or Config()
        self.client = client
        self.state = state
        self.output = output
        self._stop = threading.Event()

    def initialize(self):
        """
        Validate configuration and build the client and state.

        Returns:
            bool: True if initialization successful, False otherwise
        """
        if not self.config.validate():
            return False

        if self.client is None:
            self.client = NodeScopeClient(self.config.api_url, timeout=self.config.request_timeout)
        if self.state is None:
            self.state = VisualizerState(
                search_term=self.config.search_term,
                label_filters=self.config.label_filters,
                detailed_view=self.config.detailed_view,
                poll_interval=self.config.poll_interval,
            )
        return True

    def refresh(self):
        """
        Run a single poll tick.

        On failure the previous tree is left untouched.

        Returns:
            bool: True if a new tree was applied, False otherwise
        """
        request_id = self.state.begin_request()
        try:
            nodes = self.client.fetch_nodes()
        except FetchFailed as e:
            logger.error(f"Error fetching Kubernetes data: {e}")
            return False

        if not self.state.apply_response(request_id, nodes):
            return False

        logger.info(f"Fetched {len(nodes)} nodes, {sum(len(n.pods) for n in nodes)} pods")
        self.output(render_text(self.state))
        return True

    def stop(self):
        """Stop future ticks; an in-flight request still completes."""
        self._stop.set()

    def run_continuous(self):
        """Refresh every state.poll_interval seconds until stopped or the interval is set to 0."""
        logger.info(f"Running in continuous mode with {self.state.poll_interval} second interval")
        try:
            while not self._stop.is_set() and self.state.poll_interval > 0:
                if not self.refresh():
                    logger.warning("Refresh did not update the view, will retry on next interval")
                self._stop.wait(self.state.poll_interval)
        except KeyboardInterrupt:
            logger.info("Received interrupt signal, shutting down")
        finally:
            self.client.close()

    def run_once(self):
        """
        Refresh once.

        Returns:
            bool: True if successful, False otherwise
        """
        try:
            return self.refresh()
        finally:
            self.client.close()
