#!/usr/bin/env python3
"""
Kubernetes Cluster Visualizer
Entry point script that uses the nodescope.visualizer package.
Polls a NodeScope API and prints the filtered node/pod view.
"""

import sys
import logging
from nodescope.visualizer.poller import ClusterPoller

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Main execution function."""
    logger.info("Starting Kubernetes cluster visualizer")

    poller = ClusterPoller()

    if not poller.initialize():
        sys.exit(1)

    # Run in continuous mode if POLL_INTERVAL is set
    if poller.state.poll_interval > 0:
        poller.run_continuous()
    elif not poller.run_once():
        sys.exit(1)


if __name__ == "__main__":
    main()
