import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from readability_api.api.routes import router
from readability_api.core import logger as log_module
from readability_api.core.config import settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    log_module.logger.log(f"Server is listening on {settings.PORT}")
    yield

app = FastAPI(
    title=settings.SERVICE_NAME,
    description="Fetches a web page and returns its readable article as JSON",
    version=settings.VERSION,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.include_router(router)

def run() -> None:
    """Serve until killed. Failing to start is fatal."""
    try:
        port = int(settings.PORT)
    except ValueError:
        log_module.logger.log(f"Server failed to start: invalid port {settings.PORT!r}")
        sys.exit(1)

    try:
        uvicorn.run(app, host="0.0.0.0", port=port)
    except SystemExit as e:
        # uvicorn exits with a non-zero code when it cannot bind the port
        if e.code:
            log_module.logger.log(f"Server failed to start on port {port}")
        raise
    except OSError as e:
        log_module.logger.log(f"Server failed to start: {e}")
        sys.exit(1)

if __name__ == "__main__":
    run()
