import json
import logging
import os
from typing import Optional

from .exceptions import WriteError
from .models import ArticleRecord

logger = logging.getLogger(__name__)

JSON_FILENAME = "article.json"
TEXT_FILENAME = "article.txt"
MISSING = "Unknown"


def _show(value: Optional[str]) -> str:
    return MISSING if value is None else value


def render_json(record: ArticleRecord) -> str:
    """Serialize the whitespace-normalized record with two-space indentation."""
    return json.dumps(record.normalized().to_dict(), indent=2, ensure_ascii=False)


def render_text(record: ArticleRecord) -> str:
    content = "\n\n".join(block.text for block in record.content)
    images = "\n".join(f"- {img.src} ({img.alt})" for img in record.images)
    text = (
        f"Title: {_show(record.title)}\n"
        f"Author: {_show(record.author)}\n"
        f"Date: {_show(record.date)}\n"
        f"Estimated Reading Time: {record.estimated_reading_time}\n"
        "\n"
        "Content:\n"
        f"{content}\n"
        "\n"
        "Images:\n"
        f"{images}\n"
    )
    return text.strip()


def _write(path: str, data: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(f"Could not write {path}: {e}", path=path) from e


def save_article(record: ArticleRecord, output_dir: str = ".") -> None:
    """Write ``article.json`` and ``article.txt`` into ``output_dir``."""
    json_path = os.path.join(output_dir, JSON_FILENAME)
    _write(json_path, render_json(record))
    logger.info(f"Article data saved to {json_path}")

    text_path = os.path.join(output_dir, TEXT_FILENAME)
    _write(text_path, render_text(record))
    logger.info(f"Article text saved to {text_path}")


def print_summary(record: ArticleRecord) -> None:
    print("\nArticle Summary:")
    print(f"Title: {_show(record.title)}")
    print(f"Author: {_show(record.author)}")
    print(f"Date: {_show(record.date)}")
    print(f"Reading Time: {record.estimated_reading_time}")
    print(f"Content Length: {len(record.content)} paragraphs")
    print(f"Images: {len(record.images)}")
