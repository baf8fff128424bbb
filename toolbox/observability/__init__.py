"""
Observability module.

Logging setup, request id propagation and request logging middleware.
"""

from toolbox.observability.logger import configure_logging
from toolbox.observability.correlation import get_request_id, set_request_id

__all__ = ["configure_logging", "get_request_id", "set_request_id"]
