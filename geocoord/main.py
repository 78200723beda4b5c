from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from geocoord.adapters.api.controllers.geodesy import router as geodesy_router
from geocoord.adapters.api.controllers.polyline import router as polyline_router
from geocoord.domain.exceptions import GeodesyError

app = FastAPI(title="GeoCoord")
app.include_router(geodesy_router)
app.include_router(polyline_router)


@app.exception_handler(GeodesyError)
async def geodesy_error_handler(request: Request, exc: GeodesyError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return unexpected failures as JSON like every other response.

    API clients read `detail` from each error body; the default Starlette 500
    is plain text. Only ValueError and RuntimeError messages are shown unless
    GEOCOORD_REVEAL_ERRORS is set.
    """

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("GEOCOORD_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
