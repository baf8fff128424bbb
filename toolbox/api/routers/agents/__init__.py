"""
Agents router package.

Exports the router for Claude micro agent endpoints.
"""

from .agents_router import router

__all__ = ["router"]
