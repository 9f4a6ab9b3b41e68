from .browser import BrowserSession, navigate
from .exceptions import (
    ExtractionError,
    LaunchError,
    NavigationError,
    ScraperError,
    WriteError,
)
from .extractor import extract_article, parse_article
from .models import ArticleRecord, ContentBlock, ImageRef
from .pipeline import run, scrape_article
from .writer import print_summary, save_article

__all__ = [
    "ArticleRecord",
    "BrowserSession",
    "ContentBlock",
    "ExtractionError",
    "ImageRef",
    "LaunchError",
    "NavigationError",
    "ScraperError",
    "WriteError",
    "extract_article",
    "navigate",
    "parse_article",
    "print_summary",
    "run",
    "save_article",
    "scrape_article",
]
