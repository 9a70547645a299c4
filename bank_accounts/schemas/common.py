"""
Pieces shared by every schema module: timestamp
serialization, the account id pattern, and the error bodies
returned by the API.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, Iterable

from pydantic import BaseModel, PlainSerializer

from bank_accounts.exceptions import InvalidParam


ACCOUNT_ID_PATTERN = r"^[a-fA-F0-9]{8}-(?:[a-fA-F0-9]{4}-){3}[a-fA-F0-9]{12}$"

# Amounts and balances keep at most 15 significant digits, two of
# them decimals. SQLite stores NUMERIC as a double, which holds 15
# digits exactly.
MONEY_MAX_DIGITS = 15
MAX_AMOUNT = Decimal("9999999999999.99")


def format_timestamp(value: datetime) -> str:
    """
    ISO-8601 with milliseconds and offset, e.g.
    2024-03-17T10:15:30.123+00:00.

    SQLite hands back naive datetimes; they were written as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="milliseconds")


Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str)]


def invalid_params_from_errors(errors: Iterable[dict[str, Any]]) -> list[InvalidParam]:
    """
    Convert pydantic error dicts into (cause, attribute) pairs.

    Errors raised from our own field validators carry the
    original ValueError in ctx; its message is used as-is so
    the client sees "Amount should ..." rather than pydantic's
    "Value error, Amount should ...".
    """
    params = []
    for error in errors:
        attribute = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        ctx = error.get("ctx") or {}
        cause = str(ctx["error"]) if "error" in ctx else error.get("msg", "")
        params.append(InvalidParam(cause=cause, attribute=attribute))
    return params


# --- Response Schemas ---

class InvalidParamResponse(BaseModel):
    cause: str
    attribute: str


class ErrorResponse(BaseModel):
    status: int
    message: str


class ValidationErrorResponse(BaseModel):
    status: int = 400
    title: str = "Validation Failed"
    detail: str = "Request validation failed"
    invalid_params: list[InvalidParamResponse]


class MessageResponse(BaseModel):
    message: str
