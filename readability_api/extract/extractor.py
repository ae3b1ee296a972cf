from dataclasses import dataclass

from bs4 import BeautifulSoup
from readability import Document

# Returned by readability-lxml when a page has no usable <title>.
_NO_TITLE_MARKERS = ("", "[no-title]")


@dataclass
class Article:
    title: str
    content: BeautifulSoup


class ExtractionError(Exception):
    """The page could not be turned into an article."""


class RenderError(Exception):
    """The extracted article could not be serialized to HTML."""


def extract_article(content: bytes, base_url: str) -> Article:
    """
    Run readability over raw page bytes.

    Encoding detection and link absolutization (against `base_url`) are done
    by readability-lxml. The article body is kept as a BeautifulSoup tree
    until it is rendered.
    """
    try:
        document = Document(content, url=base_url)
        summary = document.summary(html_partial=True)
        title = document.short_title().strip()
    except Exception as e:
        raise ExtractionError(str(e) or e.__class__.__name__) from e

    tree = BeautifulSoup(summary, "html.parser")
    if not tree.get_text(strip=True):
        raise ExtractionError("Readability returned empty")

    if title in _NO_TITLE_MARKERS:
        title = _heading_title(content)

    return Article(title=title, content=tree)


def _heading_title(content: bytes) -> str:
    """Fallback title: the first h1 (or h2) of the page."""
    soup = BeautifulSoup(content, "html.parser")
    for name in ("h1", "h2"):
        heading = soup.find(name)
        if heading:
            text = heading.get_text(" ", strip=True)
            if text:
                return text
    return ""


def render_html(article: Article) -> str:
    try:
        return article.content.decode()
    except Exception as e:
        raise RenderError(str(e) or e.__class__.__name__) from e
