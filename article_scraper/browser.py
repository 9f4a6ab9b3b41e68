import logging
from typing import Optional

from playwright.async_api import (
    Browser,
    Error as PlaywrightError,
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeoutError,
    async_playwright,
)

from .exceptions import LaunchError, NavigationError

logger = logging.getLogger(__name__)

USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
    'AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)
NAVIGATION_TIMEOUT_MS = 60_000


class BrowserSession:
    """One headless Chromium process with a single page.

    Use it as an async context manager; the browser is closed on every
    exit path::

        async with BrowserSession() as page:
            await navigate(page, url)
    """

    def __init__(self, user_agent: str = USER_AGENT, headless: bool = True) -> None:
        self.user_agent = user_agent
        self.headless = headless
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.page: Optional[Page] = None

    async def start(self) -> Page:
        """Start Playwright, the browser and a page with the configured user agent."""
        if self.page:
            return self.page

        try:
            logger.info("Launching browser...")
            self.playwright = await async_playwright().start()
            self.browser = await self.playwright.chromium.launch(headless=self.headless)

            logger.info("Creating new page...")
            # no_viewport lets the page take the window size, like a real browser
            self.page = await self.browser.new_page(
                user_agent=self.user_agent, no_viewport=True
            )
        except (PlaywrightError, OSError) as e:
            await self.cleanup()
            raise LaunchError(f"Failed to launch browser: {e}") from e
        return self.page

    async def cleanup(self) -> None:
        try:
            if self.browser:
                logger.info("Closing browser...")
                try:
                    await self.browser.close()
                except PlaywrightError as e:
                    logger.error(f"Error while closing browser: {e}")
        finally:
            self.browser = None
            self.page = None
            if self.playwright:
                playwright, self.playwright = self.playwright, None
                await playwright.stop()

    async def __aenter__(self) -> Page:
        return await self.start()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()
        return False


async def navigate(page: Page, url: str, timeout_ms: int = NAVIGATION_TIMEOUT_MS) -> None:
    """Load ``url`` and wait until the network is idle.

    Raises:
        NavigationError: If the page does not settle within ``timeout_ms``
            or the target cannot be reached.
    """
    logger.info(f"Navigating to {url}...")
    try:
        await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
    except PlaywrightTimeoutError as e:
        raise NavigationError(
            f"Timed out after {timeout_ms} ms loading {url}", url=url
        ) from e
    except PlaywrightError as e:
        raise NavigationError(f"Could not load {url}: {e}", url=url) from e
