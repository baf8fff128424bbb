"""
Tools router package.

Exports the router for tool directory endpoints.
"""

from .tools_router import router

__all__ = ["router"]
