"""
Delete news articles whose URL no longer resolves.

HEAD-checks up to 1000 stored article URLs, 200ms apart. Articles that
answer with a status of 400 or above are deleted; network errors count
as reachable. Without --apply the script only reports.

Usage:
    python -m toolbox.scripts.cleanup_broken_urls [--apply]

Dependencies: httpx, python-dotenv, toolbox.boundary
System role: News table maintenance
"""

import argparse
import asyncio
import logging

import httpx
from dotenv import load_dotenv

from toolbox.boundary.db.connection import SessionScope, dispose_engine, session_scope
from toolbox.boundary.db.CRUD.news_crud import news_crud
from toolbox.boundary.http.url_check import probe_url_status
from toolbox.observability import configure_logging
from toolbox.observability.log_utils import preview

logger = logging.getLogger(__name__)

MAX_ARTICLES = 1000
CHECK_DELAY_SECONDS = 0.2
NEWS_BOT_USER_AGENT = "Mozilla/5.0 (compatible; AI-News-Bot/1.0)"


async def find_broken_articles(
    articles: list[tuple[str, str, str]],
    client: httpx.AsyncClient,
    delay: float = CHECK_DELAY_SECONDS,
) -> list[dict]:
    """
    Args:
        articles: (id, title, url) triples

    Returns:
        list[dict]: {"id", "title", "url", "status"} for every broken URL
    """
    broken = []
    for index, (article_id, title, url) in enumerate(articles, start=1):
        status = await probe_url_status(url, client=client)
        if status is not None and status >= 400:
            broken.append({"id": article_id, "title": title, "url": url, "status": status})
            logger.info(f"[{index}/{len(articles)}] {status} {preview(title, 50)}")
        if index < len(articles):
            await asyncio.sleep(delay)
    return broken


async def delete_articles(ids: list[str], session_factory: SessionScope = session_scope) -> int:
    """Bulk delete, retrying one by one when the bulk statement fails."""
    try:
        async with session_factory() as session:
            return await news_crud.delete_by_ids(session, ids)
    except Exception as e:
        logger.error("Bulk delete failed, deleting one by one", extra={"error": str(e)})

    deleted = 0
    for article_id in ids:
        try:
            async with session_factory() as session:
                if await news_crud.delete_by_id(session, article_id):
                    deleted += 1
        except Exception as e:
            logger.error(f"Failed to delete article {article_id}", extra={"error": str(e)})
    return deleted


async def cleanup_broken_urls(
    apply: bool = False,
    session_factory: SessionScope = session_scope,
    client: httpx.AsyncClient | None = None,
    delay: float = CHECK_DELAY_SECONDS,
) -> dict[str, int]:
    """
    Returns:
        dict: {"checked", "broken", "deleted"}
    """
    async with session_factory() as session:
        rows = await news_crud.find_all(session, limit=MAX_ARTICLES)
        articles = [(a.id, a.title, a.url) for a in rows]
    logger.info(f"Checking {len(articles)} articles")

    if client is not None:
        broken = await find_broken_articles(articles, client, delay)
    else:
        async with httpx.AsyncClient(headers={"User-Agent": NEWS_BOT_USER_AGENT}) as owned:
            broken = await find_broken_articles(articles, owned, delay)

    deleted = 0
    if broken and apply:
        deleted = await delete_articles([b["id"] for b in broken], session_factory)
    elif broken:
        logger.info(f"Dry run: {len(broken)} articles would be deleted (pass --apply)")

    stats = {"checked": len(articles), "broken": len(broken), "deleted": deleted}
    logger.info("Cleanup complete", extra=stats)
    return stats


async def _main(apply: bool) -> None:
    try:
        await cleanup_broken_urls(apply=apply)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Delete news articles with broken URLs")
    parser.add_argument("--apply", action="store_true", help="Delete instead of only reporting")
    args = parser.parse_args()

    load_dotenv()
    configure_logging()
    asyncio.run(_main(args.apply))
