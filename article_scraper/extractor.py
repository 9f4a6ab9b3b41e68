import logging
import math
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup
from playwright.async_api import Error as PlaywrightError, Page

from .exceptions import ExtractionError
from .models import ArticleRecord, ContentBlock, ImageRef

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200


@dataclass(frozen=True)
class FieldRule:
    """Single-valued field read from the first element matching ``selector``."""

    name: str
    selector: str


FIELD_RULES = (
    FieldRule("title", "h1"),
    FieldRule("author", '[data-testid="authorName"]'),
    FieldRule("date", "time"),
)
ARTICLE_SELECTOR = "article"
CONTENT_SELECTOR = "article p, article h1, article h2, article h3"
IMAGE_SELECTOR = "article img"
# Chromium runs with scripting on, so these never hold elements in the live DOM
INERT_ELEMENTS = ("noscript", "template")


def _attr(tag: Tag, name: str) -> str:
    value = tag.get(name, "")
    if isinstance(value, list):
        return " ".join(value)
    return value or ""


def _first_text(soup: BeautifulSoup, selector: str) -> Optional[str]:
    element = soup.select_one(selector)
    if element is None:
        return None
    return element.get_text().strip()


def count_words(text: str) -> int:
    return len(text.split())


def estimate_reading_time(word_count: int) -> str:
    """Render ``word_count`` as minutes of reading, rounding halves up."""
    minutes = math.floor(word_count / WORDS_PER_MINUTE + 0.5)
    return f"{minutes} minutes"


def _content_blocks(soup: BeautifulSoup) -> List[ContentBlock]:
    return [
        ContentBlock(type=element.name.lower(), text=element.get_text().strip())
        for element in soup.select(CONTENT_SELECTOR)
    ]


def _document_base(soup: BeautifulSoup, page_url: str) -> str:
    """Return the URL image sources resolve against, honouring ``<base href>``."""
    base = soup.find("base", href=True)
    if base is None:
        return page_url
    return urljoin(page_url, _attr(base, "href").strip())


def _images(soup: BeautifulSoup, base_url: str) -> List[ImageRef]:
    images = []
    for img in soup.select(IMAGE_SELECTOR):
        src = _attr(img, "src").strip()
        images.append(
            ImageRef(
                src=urljoin(base_url, src) if src else "",
                alt=_attr(img, "alt"),
            )
        )
    return images


def parse_article(html: str, base_url: str = "") -> ArticleRecord:
    """Apply the extraction rules to an HTML document.

    Fields whose element is missing come back as ``None``. Image sources are
    resolved against the document's ``<base href>``, or ``base_url`` when it
    has none. ``noscript`` and ``template`` subtrees are skipped. When the
    document has no ``article`` element the reading time is reported as ``"0 minutes"``.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise ExtractionError(f"Could not parse document from {base_url}: {e}") from e

    for name in INERT_ELEMENTS:
        for tag in soup.find_all(name):
            tag.decompose()

    fields = {rule.name: _first_text(soup, rule.selector) for rule in FIELD_RULES}

    article = soup.select_one(ARTICLE_SELECTOR)
    if article is None:
        logger.warning(f"No <article> element found on {base_url or 'page'}; reading time set to 0")
        word_count = 0
    else:
        word_count = count_words(article.get_text())

    return ArticleRecord(
        title=fields["title"],
        author=fields["author"],
        date=fields["date"],
        content=tuple(_content_blocks(soup)),
        images=tuple(_images(soup, _document_base(soup, base_url))),
        estimated_reading_time=estimate_reading_time(word_count),
    )


async def extract_article(page: Page) -> ArticleRecord:
    """Snapshot the page currently loaded in ``page`` and extract the article."""
    logger.info("Extracting article content...")
    try:
        html = await page.content()
    except PlaywrightError as e:
        raise ExtractionError(f"Could not read page content: {e}") from e
    return parse_article(html, base_url=page.url)
