from dataclasses import dataclass
from typing import Optional

@dataclass
class FetchResult:
    url: str
    status_code: int
    final_url: str
    content: bytes
    content_type: Optional[str]
    fetched_at: str  # ISO 8601

class FetchError(Exception):
    """Transport-level failure while retrieving a page."""
