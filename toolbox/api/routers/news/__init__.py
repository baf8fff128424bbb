"""
News router package.

Exports the router for news endpoints.
"""

from .news_router import router

__all__ = ["router"]
