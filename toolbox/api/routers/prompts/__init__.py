"""
Prompts router package.

Exports the router for prompt library endpoints.
"""

from .prompts_router import router

__all__ = ["router"]
