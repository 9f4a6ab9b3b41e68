import asyncio
import logging

from .browser import NAVIGATION_TIMEOUT_MS, USER_AGENT, BrowserSession, navigate
from .extractor import extract_article
from .models import ArticleRecord
from .writer import print_summary, save_article

logger = logging.getLogger(__name__)


async def scrape_article(
    url: str,
    user_agent: str = USER_AGENT,
    timeout_ms: int = NAVIGATION_TIMEOUT_MS,
    headless: bool = True,
) -> ArticleRecord:
    """Open ``url`` in a fresh browser and extract the article.

    The browser is closed before this returns, whether or not extraction
    succeeded.
    """
    async with BrowserSession(user_agent=user_agent, headless=headless) as page:
        await navigate(page, url, timeout_ms=timeout_ms)
        record = await extract_article(page)
    logger.info("Successfully scraped article")
    return record


def run(
    url: str,
    output_dir: str = ".",
    user_agent: str = USER_AGENT,
    timeout_ms: int = NAVIGATION_TIMEOUT_MS,
    headless: bool = True,
) -> ArticleRecord:
    record = asyncio.run(
        scrape_article(url, user_agent=user_agent, timeout_ms=timeout_ms, headless=headless)
    )
    save_article(record, output_dir)
    print_summary(record)
    return record
