from typing import List, Optional


def words(count: int, word: str = "lorem") -> str:
    return " ".join([word] * count)


def article_html(
    title: Optional[str] = "Hello World",
    author: Optional[str] = "Jane Doe",
    date: Optional[str] = "Jan 1, 2024",
    body: Optional[List[str]] = None,
    images: str = "",
) -> str:
    """Build a small Medium-like page; ``body=None`` leaves out the article."""
    parts = ["<html><head><title>page</title></head><body>"]
    if title is not None:
        parts.append(f"<h1>{title}</h1>")
    if author is not None:
        parts.append(f'<a data-testid="authorName" href="/@jane"> {author} </a>')
    if date is not None:
        parts.append(f"<time datetime=\"2024-01-01\">{date}</time>")
    if body is not None:
        parts.append("<article>")
        parts.extend(body)
        parts.append(images)
        parts.append("</article>")
    parts.append("</body></html>")
    return "\n".join(parts)


SCENARIO_HTML = article_html(
    body=[
        f"<p>{words(150)}</p>",
        f"<p>{words(150)}</p>",
        f"<p>{words(100)}</p>",
    ],
    images=(
        '<figure><img src="/images/cover.png" alt="Cover"></figure>'
        '<img src="https://cdn.example.com/chart.jpg" alt="Chart">'
    ),
)
