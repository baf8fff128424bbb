"""
Replace inline and placeholder featured images on SEO pages.

Pages whose featured image is a base64 data URI get that image uploaded
to S3. Pages still showing a picsum.photos placeholder get a fresh image
from the SEO agent. A page is only updated when the new URL is neither.
Without --apply the script only reports.

Usage:
    python -m toolbox.scripts.cleanup_seo_images [--apply]

Dependencies: python-dotenv, toolbox.boundary, toolbox.core.agents.gemini.seo_agent
System role: SEO page maintenance
"""

import argparse
import asyncio
import logging
import re

from dotenv import load_dotenv

from toolbox.boundary.aws.s3_client import generate_image_filename, upload_image_to_s3
from toolbox.boundary.db.connection import SessionScope, dispose_engine, session_scope
from toolbox.boundary.db.CRUD.seo_page_crud import seo_page_crud
from toolbox.core.agents.gemini.seo_agent import SEOAgent
from toolbox.observability import configure_logging

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:"
PLACEHOLDER_PREFIX = "https://picsum.photos"

_DATA_URI = re.compile(r"^data:image/(\w+);base64,(.+)$", re.DOTALL)


def needs_replacement(url: str | None) -> bool:
    return bool(url) and (url.startswith(DATA_URI_PREFIX) or url.startswith(PLACEHOLDER_PREFIX))


async def upload_inline_image(keyword: str, data_uri: str) -> str | None:
    """Upload the image embedded in a data URI; None when it is not a base64 image."""
    match = _DATA_URI.match(data_uri)
    if match is None:
        logger.warning(f"Unrecognised data URI for {keyword}")
        return None
    subtype, payload = match.groups()
    extension = "jpg" if subtype == "jpeg" else subtype
    return await upload_image_to_s3(payload, generate_image_filename(keyword, extension), f"image/{subtype}")


async def replacement_url(page, agent: SEOAgent) -> str | None:
    if page.featured_image_url.startswith(DATA_URI_PREFIX):
        url = await upload_inline_image(page.keyword, page.featured_image_url)
    else:
        url = await agent.generate_featured_image(page.keyword)
    if url and not needs_replacement(url):
        return url
    return None


async def cleanup_seo_images(
    apply: bool = False,
    session_factory: SessionScope = session_scope,
    agent: SEOAgent | None = None,
) -> dict[str, int]:
    """
    Returns:
        dict: {"found", "updated", "skipped"}
    """
    async with session_factory() as session:
        pages = [p for p in await seo_page_crud.find_all(session) if needs_replacement(p.featured_image_url)]
    logger.info(f"Found {len(pages)} SEO pages with inline or placeholder images")

    if not apply:
        if pages:
            logger.info(f"Dry run: {len(pages)} pages would get new images (pass --apply)")
        stats = {"found": len(pages), "updated": 0, "skipped": 0}
        logger.info("Image cleanup complete", extra=stats)
        return stats

    agent = agent or SEOAgent(session_factory=session_factory)
    updated = skipped = 0
    for page in pages:
        try:
            url = await replacement_url(page, agent)
            if url is None:
                logger.info(f"No replacement image for {page.slug}, keeping current one")
                skipped += 1
                continue
            async with session_factory() as session:
                await seo_page_crud.update_by_id(session, page.id, featured_image_url=url)
            logger.info(f"Updated {page.slug}", extra={"url": url})
            updated += 1
        except Exception as e:
            logger.error(f"Error processing {page.slug}", extra={"error": str(e)})
            skipped += 1

    stats = {"found": len(pages), "updated": updated, "skipped": skipped}
    logger.info("Image cleanup complete", extra=stats)
    return stats


async def _main(apply: bool) -> None:
    try:
        await cleanup_seo_images(apply=apply)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Move SEO featured images off data URIs and placeholders")
    parser.add_argument("--apply", action="store_true", help="Update pages instead of only reporting")
    args = parser.parse_args()

    load_dotenv()
    configure_logging()
    asyncio.run(_main(args.apply))
