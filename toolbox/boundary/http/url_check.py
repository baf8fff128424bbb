"""
URL validation and reachability checks.

Cleans model-supplied website URLs (trailing punctuation, missing scheme,
placeholder hosts, search-result links) and probes them with a HEAD
request. Network failures count as reachable.

Dependencies: httpx, urllib.parse
System role: Outbound URL checks for tool discovery and news cleanup
"""

import logging
import re
from urllib.parse import urlsplit, urlunsplit

import httpx

logger = logging.getLogger(__name__)

CHECK_USER_AGENT = "Mozilla/5.0 (compatible; AI-Tools-Bot/1.0)"

FAKE_HOST_PATTERNS = (
    "example.com",
    "placeholder.com",
    "test.com",
    "localhost",
    "127.0.0.1",
)

_TRAILING_PUNCTUATION = re.compile(r"[.,;:!?]+$")
_TRAILING_BRACKET = re.compile(r"[)\]}]$")


def validate_and_clean_url(url: object) -> str | None:
    """
    Normalise a website URL or reject it.

    Args:
        url: Candidate URL as returned by the model

    Returns:
        str: Cleaned absolute URL, or None when the URL is unusable
    """
    if not url or not isinstance(url, str):
        return None

    cleaned = _TRAILING_PUNCTUATION.sub("", url.strip())
    cleaned = _TRAILING_BRACKET.sub("", cleaned)
    if len(cleaned) < 10 or "." not in cleaned:
        return None
    if not cleaned.startswith(("http://", "https://")):
        cleaned = f"https://{cleaned}"

    try:
        parts = urlsplit(cleaned)
        hostname = (parts.hostname or "").lower()
    except ValueError:
        return None

    if len(hostname) < 3:
        return None
    if any(pattern in hostname for pattern in FAKE_HOST_PATTERNS):
        return None

    path = parts.path.lower()
    query = parts.query.lower()
    if "/search" in path or "/results" in path or "q=" in query or "query=" in query:
        return None

    return urlunsplit((parts.scheme, parts.netloc, parts.path or "/", parts.query, parts.fragment))


async def probe_url_status(
    url: str,
    timeout: float = 5.0,
    client: httpx.AsyncClient | None = None,
) -> int | None:
    """
    Send a HEAD request (following redirects) and return the status code.

    Returns:
        int status code, or None when the request itself failed
    """
    try:
        if client is not None:
            response = await client.head(url, timeout=timeout, follow_redirects=True)
        else:
            async with httpx.AsyncClient(headers={"User-Agent": CHECK_USER_AGENT}) as owned:
                response = await owned.head(url, timeout=timeout, follow_redirects=True)
    except httpx.TimeoutException:
        logger.info(f"URL check timeout: {url[:60]}")
        return None
    except httpx.HTTPError as e:
        logger.info(f"URL check failed: {url[:60]} ({e})")
        return None
    return response.status_code


async def check_url_accessible(
    url: str,
    timeout: float = 5.0,
    client: httpx.AsyncClient | None = None,
) -> bool:
    """True for 2xx/3xx responses and for network errors (fail open)."""
    status = await probe_url_status(url, timeout=timeout, client=client)
    if status is None:
        return True
    return 200 <= status < 400
