"""Interface layer error handling.

Domain errors carry a message key; here they are localized for the
request and rendered as ``{code, error, message}``. Handled errors are
also recorded on the request's TransactionOutcome so the database session
rolls back instead of committing.
"""

import logfire
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tavern.domain.error import BadRequestError, HTTPDomainError
from tavern.persistence.database import TransactionOutcome
from tavern.util.i18n import resolve_locale, translate


def error_response(request: Request, error: HTTPDomainError) -> JSONResponse:
    """Render ``error`` in the locale requested by the client."""
    locale = resolve_locale(request.headers.get("accept-language"))
    return JSONResponse(
        status_code=error.status_code,
        content={
            "code": error.status_code,
            "error": error.kind,
            "message": translate(error.message_key, locale, **error.params),
        },
    )


async def mark_failed(request: Request, exc: Exception) -> None:
    """Record ``exc`` as the outcome of the request's transaction."""
    container = getattr(request.state, "dishka_container", None)
    if container is None:
        return
    outcome = await container.get(TransactionOutcome)
    outcome.error = exc


async def handle_domain_error(request: Request, exc: HTTPDomainError) -> JSONResponse:
    logfire.info(
        "Request failed",
        path=request.url.path,
        status_code=exc.status_code,
        message_key=exc.message_key,
    )
    await mark_failed(request, exc)
    return error_response(request, exc)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.info(
        "Request validation failed", path=request.url.path, errors=str(exc.errors())
    )
    await mark_failed(request, exc)
    return error_response(request, BadRequestError("invalidReqParams"))


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers for domain and validation errors."""
    app.add_exception_handler(HTTPDomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
