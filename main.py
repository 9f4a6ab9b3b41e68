import argparse
import logging
import sys
from typing import List, Optional

from article_scraper import pipeline
from article_scraper.browser import NAVIGATION_TIMEOUT_MS, USER_AGENT
from article_scraper.exceptions import ScraperError
from settings import get_flag, get_setting

DEFAULT_URL = "https://murtazash123.medium.com/ab-tum-hi-kaho-kiya-karna-hai-653e0d72acd8"

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str, log_file: Optional[str]) -> None:
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Scrape a web article to JSON and text")
    parser.add_argument(
        "url",
        nargs="?",
        default=get_setting("article_url", DEFAULT_URL),
        help="article to scrape",
    )
    parser.add_argument(
        "--output-dir",
        default=get_setting("output_dir", "."),
        help="directory for article.json and article.txt",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (debug, info, warning, error, critical)",
    )
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    args = parser.parse_args(argv)

    _configure_logging(args.log_level, args.log_file)

    logger.info("Starting scraper...")
    try:
        pipeline.run(
            args.url,
            output_dir=args.output_dir,
            user_agent=get_setting("user_agent", USER_AGENT),
            timeout_ms=int(get_setting("navigation_timeout_ms", NAVIGATION_TIMEOUT_MS)),
            headless=get_flag("headless", True),
        )
    except ScraperError as e:
        logger.error(f"Scraping failed: {e.message}", exc_info=True)
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error while scraping")
        sys.exit(1)


if __name__ == "__main__":
    main()
