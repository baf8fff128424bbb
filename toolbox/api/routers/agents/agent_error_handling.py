"""
Agent error handling utilities.

Decorator for consistent error handling across agent endpoints. Agent
failures never reach it (the service falls back); it covers validation
and unexpected errors.
"""

import logging

from toolbox.api.routers.router_utils.error_mapping import error_handler

logger = logging.getLogger(__name__)

handle_agent_errors = error_handler(logger)
