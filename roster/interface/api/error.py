"""Exception handlers mapping errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
import logfire

from roster.domain.error import DomainError, UpstreamRelayError


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if exc.status_code >= 500:
        logfire.error(
            "Request failed", path=request.url.path, code=exc.code, reason=exc.reason
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.code, "reason": exc.reason},
    )


async def upstream_relay_handler(
    request: Request, exc: UpstreamRelayError
) -> Response:
    return Response(
        content=exc.body,
        status_code=exc.status_code,
        media_type="application/json",
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.warn("Request body rejected", path=request.url.path, errors=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"code": "ERR_DECODING_CONFIRMATION", "reason": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""
    app.add_exception_handler(UpstreamRelayError, upstream_relay_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
