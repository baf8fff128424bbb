"""
SEO page response mapping utilities.

Dependencies: toolbox.models.seo
System role: SEO page response transformation
"""

from typing import Any

from toolbox.models.seo import BlogListResponse, SEOPageEnvelope, SEOPageResponse


def map_page_to_response(page_data: dict[str, Any]) -> SEOPageResponse:
    return SEOPageResponse(**page_data)


def map_page_envelope(page_data: dict[str, Any]) -> SEOPageEnvelope:
    return SEOPageEnvelope(page=map_page_to_response(page_data))


def map_blogs_to_response(pages_data: list[dict[str, Any]]) -> BlogListResponse:
    return BlogListResponse(blogs=[map_page_to_response(p) for p in pages_data])
