from typing import Callable, Dict, Union
from unittest.mock import patch

import httpx
import pytest

from readability_api.core import logger as log_module
from readability_api.core.logger import RecordingLogger
from readability_api.fetch import fetcher

_real_fetch_page = fetcher.fetch_page

ARTICLE_HTML = """
<html>
<head><title>Hello from the test suite</title></head>
<body>
  <div id="nav"><a href="/">Home</a> | <a href="/about">About</a></div>
  <article>
    <h1>Hello from the test suite</h1>
    <p>Readability keeps paragraphs that look like real prose, with commas, full
    sentences, and enough words to score above the navigation and footer, which
    are short and full of links.</p>
    <p>This second paragraph adds more text to the article body, so that the
    extracted content is comfortably longer than the minimum length, and the
    scoring prefers this block over everything else on the page.</p>
    <p>A third paragraph links to <a href="/more">a relative page</a>, which
    should come back as an absolute link, resolved against the page address,
    once the article has been extracted and rendered.</p>
  </article>
  <div id="footer">Copyright</div>
</body>
</html>
"""

Page = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]

class Upstream:
    """In-memory replacement for the remote web, served through httpx.MockTransport."""

    def __init__(self):
        self.pages: Dict[str, Page] = {}
        self.requests: list[httpx.Request] = []

    def add(self, url: str, page: Page) -> None:
        self.pages[url] = page

    def add_html(self, url: str, html: str, content_type: str = "text/html; charset=utf-8") -> None:
        headers = {"Content-Type": content_type} if content_type else {}
        self.pages[url] = httpx.Response(200, headers=headers, content=html.encode("utf-8"))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = self.pages.get(str(request.url))
        if page is None:
            raise httpx.ConnectError("Name or service not known", request=request)
        if isinstance(page, Exception):
            raise page
        if callable(page):
            return page(request)
        return page

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

@pytest.fixture
def upstream():
    """Route every fetch made by the service through an Upstream instance."""
    web = Upstream()

    async def fetch_via_mock(url, **kwargs):
        kwargs.setdefault("transport", web.transport)
        return await _real_fetch_page(url, **kwargs)

    with patch("readability_api.fetch.fetcher.fetch_page", side_effect=fetch_via_mock) as mock_fetch:
        web.mock_fetch = mock_fetch
        yield web

@pytest.fixture
def recording_logger():
    """Capture service log lines instead of printing them."""
    recorder = RecordingLogger()
    with patch.object(log_module, "logger", recorder):
        yield recorder

@pytest.fixture
def article_html():
    return ARTICLE_HTML
