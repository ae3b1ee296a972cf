from typing import Optional

import httpx
from fastapi.concurrency import run_in_threadpool

from readability_api.core import logger as log_module
from readability_api.core.logger import Logger
from readability_api.extract.extractor import (
    ExtractionError,
    RenderError,
    extract_article,
    render_html,
)
from readability_api.fetch import fetcher
from readability_api.fetch.base import FetchError
from readability_api.schemas import ApiResponse, ErrorKind, ExtractFailure, ExtractSuccess

HTML_MEDIA_TYPES = ("text/html", "application/xhtml+xml")

class InvalidTargetURL(ValueError):
    pass

def parse_target_url(raw_url: str) -> httpx.URL:
    """Parse the requested URL; only absolute http(s) URLs are accepted."""
    try:
        url = httpx.URL(raw_url)
    except httpx.InvalidURL as e:
        raise InvalidTargetURL(f"parse {raw_url!r}: {e}") from e

    if not url.scheme:
        raise InvalidTargetURL(f"parse {raw_url!r}: missing protocol scheme")
    if url.scheme not in ("http", "https"):
        raise InvalidTargetURL(f"parse {raw_url!r}: unsupported protocol scheme {url.scheme!r}")
    if not url.host:
        raise InvalidTargetURL(f"parse {raw_url!r}: missing host")
    return url

def is_html_content_type(content_type: Optional[str]) -> bool:
    """An absent content type is accepted; a declared one must be HTML."""
    if not content_type:
        return True
    lowered = content_type.lower()
    return any(media_type in lowered for media_type in HTML_MEDIA_TYPES)

async def process_readability_request(raw_url: str, logger: Optional[Logger] = None) -> ApiResponse:
    """
    Fetch a page and extract its readable article.

    1. Validate the URL
    2. Fetch it (single attempt, no retries)
    3. Reject empty bodies and non-HTML content types
    4. Extract the article with readability
    5. Render the article content to HTML

    Every failure is logged with the requested URL and returned as an
    ExtractFailure; nothing is raised to the caller for expected errors.
    """
    log = logger or log_module.logger

    def fail(kind: ErrorKind, message: str) -> ExtractFailure:
        log.log(f"{raw_url}: error detail: {message}")
        return ExtractFailure(error=kind, detail=f"Error: {message}")

    log.log(f"{raw_url}: Request initiated")

    try:
        target = parse_target_url(raw_url)
    except InvalidTargetURL as e:
        return fail(ErrorKind.FETCH_FAILURE, str(e))

    # The requested URL is also the base for resolving relative links
    base_url = str(target)

    try:
        result = await fetcher.fetch_page(base_url)
    except FetchError as e:
        return fail(ErrorKind.FETCH_FAILURE, str(e))

    log.log(f"{raw_url}: {len(result.content)} bytes received")

    if not result.content:
        return fail(ErrorKind.FETCH_FAILURE, "Empty response")

    if not is_html_content_type(result.content_type):
        return fail(ErrorKind.FETCH_FAILURE, f"Unsupported content type: {result.content_type}")

    try:
        article = await run_in_threadpool(extract_article, result.content, base_url)
    except ExtractionError as e:
        return fail(ErrorKind.PARSE_FAILURE, str(e))

    log.log(f"{raw_url}: Readability title: {article.title}")

    try:
        content = render_html(article)
    except RenderError as e:
        log.log(f"{raw_url}: render error: {e}")
        return ExtractFailure(error=ErrorKind.PARSE_FAILURE, detail=f"Error rendering: {e}")

    return ExtractSuccess(title=article.title, content=content)
