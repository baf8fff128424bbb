"""
Tool error handling utilities.

Decorator for consistent error handling across tool endpoints.
"""

import logging

from toolbox.api.routers.router_utils.error_mapping import error_handler

logger = logging.getLogger(__name__)

handle_tool_errors = error_handler(logger)
