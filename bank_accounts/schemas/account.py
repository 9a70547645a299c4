"""
Pydantic schemas for current and savings accounts.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from bank_accounts.models.account import Account
from bank_accounts.models.enums import AccountStatus, AccountType
from bank_accounts.schemas.common import MONEY_MAX_DIGITS, Timestamp


# --- Request Schemas ---

class CurrentAccountRequest(BaseModel):
    """Create or update a current account."""
    balance: Decimal = Field(
        default=Decimal("0.00"), ge=0, max_digits=MONEY_MAX_DIGITS, decimal_places=2
    )
    overdraft_limit: Decimal = Field(
        default=Decimal("0.00"), ge=0, max_digits=MONEY_MAX_DIGITS, decimal_places=2
    )
    status: AccountStatus | None = None


class SavingsAccountRequest(BaseModel):
    """Create or update a savings account."""
    balance: Decimal = Field(
        default=Decimal("0.00"), ge=0, max_digits=MONEY_MAX_DIGITS, decimal_places=2
    )
    interest_rate: Decimal = Field(
        default=Decimal("0.00"), ge=0, max_digits=7, decimal_places=4
    )
    status: AccountStatus | None = None


AccountRequest = CurrentAccountRequest | SavingsAccountRequest


# --- Response Schemas ---

class AccountSummary(BaseModel):
    """Account fields nested inside an operation."""
    id: str
    balance: Decimal
    status: AccountStatus
    account_type: AccountType

    model_config = {"from_attributes": True}


class AccountResponse(BaseModel):
    id: str
    account_type: AccountType
    balance: Decimal
    status: AccountStatus
    customer_id: int
    overdraft_limit: Decimal | None = None
    interest_rate: Decimal | None = None
    created_on: Timestamp
    modified_on: Timestamp | None = None

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        """
        Build the response, carrying only the field that belongs
        to the account's type.
        """
        fields = dict(
            id=account.id,
            account_type=account.account_type,
            balance=account.balance,
            status=account.status,
            customer_id=account.customer_id,
            created_on=account.created_on,
            modified_on=account.modified_on,
        )
        if account.account_type == AccountType.CURRENT:
            fields["overdraft_limit"] = account.overdraft_limit
        elif account.account_type == AccountType.SAVINGS:
            fields["interest_rate"] = account.interest_rate
        else:
            raise ValueError(f"Unknown account type {account.account_type}")
        return cls(**fields)
