import os

class Settings:
    SERVICE_NAME: str = "Readability API"
    VERSION: str = "1.0.0"

    # Server
    PORT: str = os.getenv("PORT") or "80"

    # Fetching (constants, not read from the environment)
    REQUEST_TIMEOUT: float = 30
    USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/113.0.0.0 Safari/537.36 Edg/113.0.1774.42"
    )

settings = Settings()
