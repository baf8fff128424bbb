"""
RSS / Atom feed client.

Fetches a feed over HTTP, parses it with feedparser and maps every entry
onto the item keys the news proxy has always returned (title, link,
pubDate, content, content:encoded, author, enclosure, media:content).
Also hosts the default AI news feed list and helpers that turn an item
into article fields.

Dependencies: httpx, feedparser
System role: Outbound RSS adapter for the news proxy route
"""

import logging
import re
from typing import Any

import feedparser
import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; AI Tool Box Bot/1.0)"
REQUEST_TIMEOUT = 15.0

RSS_FEEDS: list[dict[str, str]] = [
    {"url": "https://feeds.feedburner.com/oreilly/radar", "source": "O'Reilly Radar", "category": "AI"},
    {"url": "https://www.theverge.com/ai-artificial-intelligence/rss/index.xml", "source": "The Verge - AI", "category": "AI"},
    {"url": "https://techcrunch.com/tag/artificial-intelligence/feed/", "source": "TechCrunch - AI", "category": "AI"},
    {"url": "https://venturebeat.com/ai/feed/", "source": "VentureBeat - AI", "category": "AI"},
    {"url": "https://www.wired.com/feed/tag/artificial-intelligence/rss", "source": "Wired - AI", "category": "AI"},
    {"url": "https://www.artificialintelligence-news.com/feed/", "source": "AI News", "category": "AI"},
]

# Applied to already-parsed HTML fragments (summary / content bodies)
_IMG_SRC = re.compile(r'<img[^>]+src="([^"]+)"', re.IGNORECASE)
_TAG = re.compile(r"<[^>]*>")


def _first_media(entry: Any, key: str) -> dict[str, str] | None:
    for media in entry.get(key) or []:
        url = media.get("href") or media.get("url")
        if url:
            return {"url": url, "type": media.get("type", "")}
    return None


def entry_to_item(entry: Any) -> dict[str, Any] | None:
    """
    Map one feedparser entry onto an item dict.

    Returns:
        dict, or None when the entry has no title or no link
    """
    title = (entry.get("title") or "").strip()
    link = (entry.get("link") or "").strip()
    if not title or not link:
        return None

    item: dict[str, Any] = {"title": title, "link": link}
    published = entry.get("published") or entry.get("updated")
    if published:
        item["pubDate"] = published
    if entry.get("summary"):
        item["content"] = entry["summary"]
    contents = entry.get("content") or []
    if contents and contents[0].get("value"):
        item["content:encoded"] = contents[0]["value"]
    if entry.get("author"):
        item["author"] = entry["author"]
    enclosure = _first_media(entry, "enclosures")
    if enclosure:
        item["enclosure"] = enclosure
    media = _first_media(entry, "media_content")
    if media:
        item["media:content"] = media
    return item


def parse_rss_items(xml: str) -> list[dict[str, Any]]:
    """
    Parse an RSS or Atom document into items.

    Entries without both a title and a link are dropped. Optional fields are
    omitted when absent; entities and CDATA are decoded by feedparser.

    Args:
        xml: Feed document

    Returns:
        list[dict]: Items with title, link and optional pubDate, content,
        content:encoded, author, enclosure {url, type} and media:content
    """
    parsed = feedparser.parse(xml)
    if parsed.get("bozo") and not parsed.entries:
        logger.warning("Feed could not be parsed", extra={"error": str(parsed.get("bozo_exception"))})
    return [item for item in (entry_to_item(e) for e in parsed.entries) if item is not None]


async def fetch_rss_feed(url: str, client: httpx.AsyncClient | None = None) -> list[dict[str, Any]]:
    """
    Download and parse one feed.

    Args:
        url: Feed URL
        client: Optional shared client (a short-lived one is created otherwise)

    Returns:
        list[dict]: Parsed items

    Raises:
        httpx.HTTPError: On network failure or a non-2xx response
    """
    headers = {"User-Agent": USER_AGENT}
    if client is None:
        async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT, follow_redirects=True) as owned:
            response = await owned.get(url, headers=headers)
    else:
        response = await client.get(url, headers=headers)
    response.raise_for_status()

    items = parse_rss_items(response.text)
    logger.info("RSS feed parsed", extra={"url": url, "item_count": len(items)})
    return items


def extract_image_url(item: dict[str, Any]) -> str | None:
    """Image enclosure, media:content, or the first <img src> in the content."""
    enclosure = item.get("enclosure") or {}
    if str(enclosure.get("type", "")).startswith("image/"):
        return enclosure.get("url")
    media = item.get("media:content") or {}
    if media.get("url"):
        return media["url"]
    content = item.get("content:encoded") or item.get("content") or ""
    match = _IMG_SRC.search(content)
    return match.group(1) if match else None


def extract_description(item: dict[str, Any]) -> str:
    """Plain-text description, HTML stripped, at most 300 characters."""
    description = item.get("contentSnippet") or item.get("content") or ""
    return _TAG.sub("", description).strip()[:300]
