"""
Pydantic schemas for deposits, withdrawals and transfers.
"""

import re
from decimal import Decimal

from pydantic import BaseModel, field_validator

from bank_accounts.models.enums import OperationType
from bank_accounts.schemas.account import AccountResponse, AccountSummary
from bank_accounts.schemas.common import ACCOUNT_ID_PATTERN, MAX_AMOUNT, Timestamp


MIN_AMOUNT = Decimal("0.01")


def check_amount(v: Decimal) -> Decimal:
    if v < MIN_AMOUNT:
        raise ValueError("Amount should be strictly positive and at least 0.01")
    # Bounded before quantize, which fails on very large values.
    if v > MAX_AMOUNT:
        raise ValueError(f"Amount cannot exceed {MAX_AMOUNT}")
    if v != v.quantize(MIN_AMOUNT):
        raise ValueError("Amount should have at most two decimal places.")
    return v


# --- Request Schemas ---

class OperationRequest(BaseModel):
    """
    A deposit, withdrawal or transfer as received on the wire.

    Deposits and withdrawals use account_id; transfers use
    source_account_id and target_account_id. Which one is
    required is checked by the OperationService, since it
    depends on operation_type.
    """
    account_id: str | None = None
    source_account_id: str | None = None
    target_account_id: str | None = None
    amount: Decimal
    operation_type: OperationType | None = None

    @field_validator("amount")
    @classmethod
    def amount_must_be_valid(cls, v: Decimal) -> Decimal:
        return check_amount(v)

    @field_validator("target_account_id")
    @classmethod
    def target_must_be_uuid(cls, v: str | None) -> str | None:
        if v is not None and not re.match(ACCOUNT_ID_PATTERN, v):
            raise ValueError("Destination account ID should be a valid format")
        return v


class OperationRecord(BaseModel):
    """
    Constraints on an Operation entity before it is saved.
    Checked by the ValidationService.
    """
    amount: Decimal
    operation_type: OperationType
    account_id: str

    model_config = {"from_attributes": True}

    @field_validator("amount")
    @classmethod
    def amount_must_be_valid(cls, v: Decimal) -> Decimal:
        return check_amount(v)


# --- Response Schemas ---

class OperationResponse(BaseModel):
    id: int
    amount: Decimal
    operation_type: OperationType
    operation_date: Timestamp
    description: str | None
    account: AccountSummary | None = None

    model_config = {"from_attributes": True}


class TransferResponse(BaseModel):
    source_operation: OperationResponse
    target_operation: OperationResponse


class AccountDetailsResponse(BaseModel):
    account: AccountResponse
    operations: list[OperationResponse]


class AccountHistoryResponse(BaseModel):
    account: AccountResponse
    current_page: int
    total_pages: int
    page_size: int
    operations: list[OperationResponse]
