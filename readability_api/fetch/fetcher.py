import datetime as dt
from typing import Optional

import httpx

from readability_api.core.config import settings
from .base import FetchError, FetchResult

async def fetch_page(
    url: str,
    *,
    timeout: Optional[float] = None,
    user_agent: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FetchResult:
    """
    Fetch a page with a single GET request.

    Redirects are followed with httpx defaults. Status codes are recorded
    but never treated as errors; only transport failures raise FetchError.
    """
    headers = {"User-Agent": user_agent or settings.USER_AGENT}
    client_timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout

    try:
        async with httpx.AsyncClient(
            timeout=client_timeout,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        ) as client:
            response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(str(e) or e.__class__.__name__) from e

    return FetchResult(
        url=url,
        status_code=int(response.status_code),
        final_url=str(response.url),
        content=response.content,
        content_type=response.headers.get("content-type"),
        fetched_at=dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
    )
