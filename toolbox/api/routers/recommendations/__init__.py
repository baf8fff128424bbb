"""
Recommendations router package.

Exports the router for the chat recommendation endpoint.
"""

from .recommendations_router import router

__all__ = ["router"]
