"""
Error handling - uniform JSON error bodies and the request boundary.

Every error body is {"error": "<message>"}; validation errors add
"details", routing misses echo "method" and "path".
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal.storage.base import StorageError
from portal.utils.resume_codec import ResumeEncodingError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}

# Details Starlette's router uses when nothing matched
ROUTING_MISS_DETAILS = ("Not Found", "Method Not Allowed")


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def validation_message(errors: list) -> str:
    if any(err.get("type") == "json_invalid" for err in errors):
        return "Request body is not valid JSON"

    missing = []
    for err in errors:
        if err.get("type") != "missing":
            continue
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        if not loc:
            return "Missing request body"
        missing.append(loc[-1])
    if missing:
        return "Missing required fields: " + ", ".join(missing)

    return "Invalid request body"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in errors
    ]
    return error_response(400, validation_message(errors), details=details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405 or (exc.status_code == 404 and exc.detail in ROUTING_MISS_DETAILS):
        return error_response(404, "Not found", method=request.method, path=request.url.path)
    return error_response(exc.status_code, str(exc.detail))


async def storage_exception_handler(request: Request, exc: StorageError):
    return error_response(500, str(exc))


async def resume_encoding_exception_handler(request: Request, exc: ResumeEncodingError):
    return error_response(400, str(exc))


async def request_boundary(request: Request, call_next):
    """
    Outermost handler: answers preflight, adds CORS headers to every
    response and turns unexpected exceptions into a 500.
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Unhandled error in %s %s", request.method, request.url.path)
        response = error_response(500, "Internal server error")

    response.headers.update(CORS_HEADERS)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(ResumeEncodingError, resume_encoding_exception_handler)
    app.middleware("http")(request_boundary)
