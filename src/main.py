from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.inputs import router as inputs_router
from src.adapters.api.controllers.routes import router as routes_router
from src.domain.exceptions import (
    AmbiguousStation,
    MissingEndpoint,
    RouteSearchError,
    StationNotFound,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Ekiroute")
app.include_router(routes_router)
app.include_router(inputs_router)

_STATUS_BY_ERROR: dict[type[RouteSearchError], int] = {
    MissingEndpoint: 422,
    StationNotFound: 404,
    AmbiguousStation: 409,
}


@app.exception_handler(RouteSearchError)
async def route_search_error_handler(
    request: Request, exc: RouteSearchError
) -> JSONResponse:
    """User-facing failures that abort a run before any output is written."""

    status_code = next(
        (code for cls, code in _STATUS_BY_ERROR.items() if isinstance(exc, cls)), 400
    )
    content: dict[str, object] = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, AmbiguousStation):
        content["candidates"] = [
            {"name": s.name, "code": s.code} for s in exc.candidates
        ]
    return JSONResponse(status_code=status_code, content=content)


def _reveal_errors() -> bool:
    flag = (os.getenv("EKIROUTE_REVEAL_ERRORS") or "").strip().lower()
    return flag in {"1", "true", "yes", "on"}


def _error_detail(exc: Exception) -> str:
    # KeyError's str() wraps the message in quotes.
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc) or exc.__class__.__name__


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unexpected failures still answer with a JSON body.

    Workbook problems (a missing sheet, an unreadable or unwritable file) keep
    their message so the user can repair the workbook; anything else stays
    opaque unless EKIROUTE_REVEAL_ERRORS is set.
    """

    logger.exception("Unhandled error on %s", request.url.path)

    if _reveal_errors() or isinstance(exc, (KeyError, OSError, ValueError)):
        detail = _error_detail(exc)
    else:
        detail = "Internal Server Error"
    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
