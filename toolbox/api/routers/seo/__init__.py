"""
SEO router package.

Exports the SEO page router and the blog index router.
"""

from .blog_router import router as blog_router
from .seo_router import router

__all__ = ["blog_router", "router"]
