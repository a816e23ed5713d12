# backend/studio_scheduler/errors.py
"""
Unified JSON error envelope.

Every error response has the shape::

    {"type": "about:blank", "title": ..., "status": ..., "detail": ...,
     "instance": <path>, "code": ..., "errors": ...}

Domain exceptions reach here as HTTPException with a
``{"message", "code", "details"}`` detail. The send-email endpoint raises
``{"error": ...}`` instead; that key is repeated at the top level so clients
can read ``body["error"]``.
"""

from http import HTTPStatus
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _envelope(
    request: Request,
    status_code: int,
    detail: Any = None,
    code: Optional[str] = None,
    errors: Any = None,
) -> Dict[str, Any]:
    try:
        title = HTTPStatus(status_code).phrase
    except ValueError:
        title = "Error"
    body: Dict[str, Any] = {
        "type": "about:blank",
        "title": title,
        "status": status_code,
        "detail": detail if detail is not None else "",
        "instance": request.url.path,
    }
    if code:
        body["code"] = code
    if errors:
        body["errors"] = jsonable_encoder(errors)
    return body


def _from_http_detail(request: Request, status_code: int, detail: Any) -> Dict[str, Any]:
    if not isinstance(detail, dict):
        return _envelope(request, status_code, detail=None if detail is None else str(detail))

    message = detail.get("message") or detail.get("detail") or detail.get("error")
    code = detail.get("code")
    body = _envelope(
        request,
        status_code,
        detail=message if isinstance(message, str) else None,
        code=code if isinstance(code, str) else None,
        errors=detail.get("details") or detail.get("errors"),
    )
    if isinstance(detail.get("error"), str):
        body["error"] = detail["error"]
    return body


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            _from_http_detail(request, exc.status_code, exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = jsonable_encoder(exc.errors())
        return JSONResponse(
            _envelope(request, 422, detail=errors, code="validation_error", errors=errors),
            status_code=422,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.url.path}: {str(exc)}")
        return JSONResponse(
            _envelope(request, 500, detail="Internal Server Error", code="internal_server_error"),
            status_code=500,
        )
