"""
Exception handlers.

Services raise typed BankAccountError subclasses; these
handlers turn them into HTTP responses so endpoints only
have to roll back and re-raise.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bank_accounts.exceptions import (
    AccountNotFoundError,
    BankAccountError,
    CustomerNotFoundError,
    InsufficientBalanceError,
    InvalidArgumentError,
    InvalidParam,
    OperationNotFoundError,
    ValidationFailedError,
)
from bank_accounts.schemas.common import (
    ErrorResponse,
    InvalidParamResponse,
    ValidationErrorResponse,
    invalid_params_from_errors,
)

logger = logging.getLogger(__name__)


STATUS_CODES: dict[type[BankAccountError], int] = {
    AccountNotFoundError: 404,
    CustomerNotFoundError: 404,
    OperationNotFoundError: 404,
    InsufficientBalanceError: 400,
    InvalidArgumentError: 400,
    ValidationFailedError: 400,
}


def validation_response(invalid_params: list[InvalidParam]) -> JSONResponse:
    body = ValidationErrorResponse(
        invalid_params=[
            InvalidParamResponse(cause=p.cause, attribute=p.attribute)
            for p in invalid_params
        ]
    )
    return JSONResponse(status_code=400, content=body.model_dump())


async def handle_bank_account_error(request: Request, exc: BankAccountError) -> JSONResponse:
    status_code = STATUS_CODES.get(type(exc), 400)
    logger.error("%s handled: %s", type(exc).__name__, exc)

    if isinstance(exc, ValidationFailedError):
        return validation_response(exc.invalid_params)
    if isinstance(exc, InvalidArgumentError) and exc.invalid_params:
        return validation_response(exc.invalid_params)

    body = ErrorResponse(status=status_code, message=str(exc))
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    invalid_params = invalid_params_from_errors(exc.errors())
    logger.error(
        "Request validation failed on %s: %s",
        request.url.path,
        ", ".join(f"{p.attribute}: {p.cause}" for p in invalid_params),
    )
    return validation_response(invalid_params)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s", request.url.path)
    body = ErrorResponse(status=500, message="An error has occurred.")
    return JSONResponse(status_code=500, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BankAccountError, handle_bank_account_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
