"""Outbound HTTP adapters (RSS feeds, URL reachability)."""

from toolbox.boundary.http.rss import (
    RSS_FEEDS,
    extract_description,
    extract_image_url,
    fetch_rss_feed,
    parse_rss_items,
)
from toolbox.boundary.http.url_check import (
    check_url_accessible,
    probe_url_status,
    validate_and_clean_url,
)

__all__ = [
    "RSS_FEEDS",
    "check_url_accessible",
    "extract_description",
    "extract_image_url",
    "fetch_rss_feed",
    "parse_rss_items",
    "probe_url_status",
    "validate_and_clean_url",
]
