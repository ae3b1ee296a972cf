from typing import Optional

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from readability_api.core import logger as log_module
from readability_api.services import readability

router = APIRouter()

@router.get("/")
async def extract(request: Request, url: Optional[str] = None):
    """
    Fetch `url` and return its readable article.

    A missing or empty `url` is answered with a bare 400 (no JSON body).
    Every other outcome is a 200 with a success or fail envelope.
    """
    incoming = request.url.path
    if request.url.query:
        incoming += "?" + request.url.query
    log_module.logger.log(f"Incoming request: {incoming}")

    if not url:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    result = await readability.process_readability_request(url)
    return JSONResponse(content=result.model_dump(mode="json"))

@router.get("/ok", response_class=PlainTextResponse)
async def ok():
    """Liveness probe"""
    return "ok"
