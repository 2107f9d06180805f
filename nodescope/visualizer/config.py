"""
Configuration management module.
Handles loading and validation of visualizer configuration from environment variables.
"""

import os
import logging
from urllib.parse import urlparse
from nodescope.visualizer.store import POLL_INTERVALS

logger = logging.getLogger(__name__)


def parse_label_filters(value):
    """
    Parse a label filter string.

    Example:
        "env=prod|staging,tier=frontend"
        -> {"env": ["prod", "staging"], "tier": ["frontend"]}

    Args:
        value: Comma-separated key=value1|value2 entries

    Returns:
        dict: label key -> selected values
    """
    filters = {}
    for entry in (value or "").split(","):
        entry = entry.strip()
        if not entry or "=" not in entry:
            continue
        key, values = entry.split("=", 1)
        if not key.strip():
            continue
        filters[key.strip()] = [v.strip() for v in values.split("|") if v.strip()]
    return filters


class Config:
    """Configuration class for the terminal visualizer."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        # NodeScope API
        self.api_url = os.getenv("NODESCOPE_API_URL", "http://localhost:8000").rstrip("/")
        self.request_timeout = os.getenv("REQUEST_TIMEOUT", "10")

        # Polling (0 = fetch once and exit)
        self.poll_interval = os.getenv("POLL_INTERVAL", "0")

        # View
        self.detailed_view = os.getenv("DETAILED_VIEW", "false").lower() == "true"
        self.search_term = os.getenv("SEARCH_TERM", "")
        self.label_filters = parse_label_filters(os.getenv("LABEL_FILTERS", ""))

    def validate(self):
        """Validate configuration; converts poll_interval and request_timeout on success."""
        parsed = urlparse(self.api_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            logger.error(f"Invalid NODESCOPE_API_URL value: {self.api_url}")
            return False

        try:
            interval = int(self.poll_interval)
        except (TypeError, ValueError):
            logger.error(f"Invalid POLL_INTERVAL value: {self.poll_interval}")
            return False
        if interval not in POLL_INTERVALS:
            logger.error(
                f"POLL_INTERVAL must be one of {', '.join(str(i) for i in POLL_INTERVALS)}, "
                f"got {interval}"
            )
            return False
        self.poll_interval = interval

        try:
            timeout = float(self.request_timeout)
        except (TypeError, ValueError):
            logger.error(f"Invalid REQUEST_TIMEOUT value: {self.request_timeout}")
            return False
        if timeout <= 0:
            logger.error("REQUEST_TIMEOUT must be positive")
            return False
        self.request_timeout = timeout

        return True
