"""
Stacks router package.

Exports the router for stack builder endpoints.
"""

from .stacks_router import router

__all__ = ["router"]
