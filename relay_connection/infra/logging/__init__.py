"""Logging setup for relay-connection entrypoints.

Library code only calls ``logging.getLogger(__name__)``; applications and
the CLI call ``setup_logging()`` once to attach handlers.
"""

from relay_connection.infra.logging.config import (
    configure_logging,
    setup_logging,
    shutdown,
)
from relay_connection.infra.logging.formatters import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
    "setup_logging",
    "shutdown",
]
