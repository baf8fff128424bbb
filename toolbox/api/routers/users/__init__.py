"""
Users router package.

Exports the router for user and interaction endpoints.
"""

from .users_router import router

__all__ = ["router"]
