"""
Account service: opens, reads, updates and deletes current
and savings accounts, and reads their operation history.

Balances are never changed here except through a direct
administrative update; deposits and withdrawals go through
the OperationService.
"""

import logging
import math
import re
from dataclasses import dataclass

from sqlalchemy.orm import Session

from bank_accounts.exceptions import (
    AccountNotFoundError,
    CustomerNotFoundError,
    InvalidArgumentError,
    InvalidParam,
)
from bank_accounts.models.account import Account, CurrentAccount, SavingsAccount
from bank_accounts.models.enums import AccountType
from bank_accounts.models.operation import Operation
from bank_accounts.schemas.account import AccountRequest
from bank_accounts.schemas.common import ACCOUNT_ID_PATTERN
from bank_accounts.stores import AccountStore, CustomerStore, OperationStore

logger = logging.getLogger(__name__)


@dataclass
class AccountHistory:
    """One page of an account's operations, newest first."""
    account: Account
    operations: list[Operation]
    current_page: int
    total_pages: int
    page_size: int


class AccountService:

    def __init__(self, db: Session):
        self.db = db
        self.accounts = AccountStore(db)
        self.customers = CustomerStore(db)
        self.operations = OperationStore(db)

    def get_account(self, account_id: str) -> Account:
        """Get an account by ID."""
        account = self.accounts.find_by_id(account_id)
        if account is None:
            logger.warning("Account not found: %s", account_id)
            raise AccountNotFoundError(account_id)
        return account

    def list_accounts(self) -> list[Account]:
        accounts = self.accounts.find_all()
        logger.info("Retrieved %d accounts", len(accounts))
        return accounts

    def create_account(
        self, customer_id: int, account_type: AccountType, request: AccountRequest
    ) -> Account:
        """
        Open a new account for a customer.

        The account starts in CREATED status whatever the request
        says; status changes go through update_account.
        """
        logger.info("Creating %s account for customer %s", account_type.value, customer_id)
        customer = self.customers.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)

        if account_type == AccountType.CURRENT:
            account = CurrentAccount(
                balance=request.balance,
                overdraft_limit=request.overdraft_limit,
            )
        elif account_type == AccountType.SAVINGS:
            account = SavingsAccount(
                balance=request.balance,
                interest_rate=request.interest_rate,
            )
        else:
            raise InvalidArgumentError("Account type not supported.")

        account.customer = customer
        self.accounts.save(account)
        logger.info(
            "%s account created with ID %s for customer %s",
            account_type.value, account.id, customer_id,
        )
        return account

    def update_account(
        self, account_id: str, account_type: AccountType, request: AccountRequest
    ) -> Account:
        """
        Replace the balance, status and type-specific field.

        The request type must match the stored account type: a
        savings account cannot be updated as a current one.
        """
        logger.info("Updating account %s", account_id)
        account = self.get_account(account_id)
        if account.account_type != account_type:
            raise InvalidArgumentError(
                f"Account {account_id} is a {account.account_type.value} account, "
                f"not {account_type.value}"
            )

        account.balance = request.balance
        if request.status is not None:
            account.status = request.status

        if account.account_type == AccountType.CURRENT:
            account.overdraft_limit = request.overdraft_limit
        elif account.account_type == AccountType.SAVINGS:
            account.interest_rate = request.interest_rate
        else:
            raise InvalidArgumentError("Account type not supported.")

        return self.accounts.save(account)

    def delete_account(self, account_id: str) -> None:
        """Delete an account together with its operations."""
        logger.info("Deleting account %s", account_id)
        account = self.get_account(account_id)
        self.accounts.delete(account)

    def get_operations(self, account_id: str) -> list[Operation]:
        """All operations of an account, newest first."""
        self.get_account(account_id)
        return self.operations.find_by_account_id(account_id)

    def account_history(self, account_id: str, page: int = 0, size: int = 5) -> AccountHistory:
        """
        One page of an account's operations.

        The id must look like a UUID; anything else is rejected
        before the database is queried.
        """
        logger.debug("Account history requested for %s", account_id)
        if not re.match(ACCOUNT_ID_PATTERN, account_id):
            logger.error("Invalid account ID format provided: %s", account_id)
            raise InvalidArgumentError(
                "Invalid account ID format provided",
                [InvalidParam(
                    cause="Account ID should be a valid UUID format",
                    attribute="accountId",
                )],
            )
        if page < 0 or size < 1:
            raise InvalidArgumentError("page must be >= 0 and size must be >= 1")

        account = self.get_account(account_id)
        total = self.operations.count_by_account_id(account_id)
        operations = self.operations.find_by_account_id(account_id, page, size)

        return AccountHistory(
            account=account,
            operations=operations,
            current_page=page,
            total_pages=math.ceil(total / size),
            page_size=size,
        )
