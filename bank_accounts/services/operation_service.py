"""
Operation service: deposits, withdrawals and transfers.

Each single-account operation:
1. Builds and validates the Operation record
2. Loads the account (locked for update)
3. Checks the balance rule (no overdraw, no balance above
   MAX_AMOUNT)
4. Updates the account balance
5. Saves the Operation record

A transfer is a withdrawal on the source followed by a
deposit on the target, inside the same unit of work. Nothing
here commits: the caller commits on success and rolls back on
any error, so a transfer is either fully applied or not at all.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.orm import Session

from bank_accounts.exceptions import (
    AccountNotFoundError,
    InsufficientBalanceError,
    InvalidArgumentError,
    OperationNotFoundError,
    BankAccountError,
    SAME_SOURCE_AND_TARGET_ACCOUNT,
)
from bank_accounts.models.account import Account
from bank_accounts.models.enums import OperationType
from bank_accounts.models.operation import Operation
from bank_accounts.schemas.operation import OperationRequest
from bank_accounts.schemas.common import MAX_AMOUNT
from bank_accounts.services.balance_validator import can_deposit, can_withdraw
from bank_accounts.services.validation_service import ValidationService
from bank_accounts.stores import AccountStore, OperationStore

logger = logging.getLogger(__name__)

# Number of leading characters of the counterpart account id
# quoted in a transfer description.
ACCOUNT_ID_PREFIX_LENGTH = 8


@dataclass
class Transfer:
    """The two legs written by one transfer."""
    source_operation: Operation
    target_operation: Operation


def operation_description(operation_type: OperationType, amount: Decimal) -> str:
    if operation_type == OperationType.DEPOSIT:
        return f"Amount Credited : {amount}"
    elif operation_type == OperationType.WITHDRAWAL:
        return f"Amount Debited : {amount}"
    raise InvalidArgumentError("Unsupported operation type")


def transfer_description(amount: Decimal, counterpart_id: str, outgoing: bool) -> str:
    """
    Description of one transfer leg, quoting the other account.

    Ids shorter than the prefix length are quoted in full.
    """
    direction = "to" if outgoing else "from"
    prefix = counterpart_id[:ACCOUNT_ID_PREFIX_LENGTH]
    return f"Transfer Amount {amount} {direction} accountId: {prefix}.."


class OperationService:

    def __init__(self, db: Session, validation_service: ValidationService | None = None):
        self.db = db
        self.accounts = AccountStore(db)
        self.operations = OperationStore(db)
        self.validation_service = validation_service or ValidationService()

    def _get_account(self, account_id: str) -> Account:
        account = self.accounts.find_by_id(account_id, for_update=True)
        if account is None:
            logger.warning("Account not found: %s", account_id)
            raise AccountNotFoundError(account_id)
        return account

    def _build_operation(
        self,
        account_id: str,
        operation_type: OperationType,
        amount: Decimal,
        description: str,
    ) -> Operation:
        operation = Operation(
            account_id=account_id,
            operation_type=operation_type,
            amount=amount,
            description=description,
        )
        self.validation_service.validate_operation(operation)
        return operation

    def perform_operation(self, request: OperationRequest) -> Operation | Transfer:
        """
        Run the operation named by request.operation_type.

        Returns an Operation for deposits and withdrawals and a
        Transfer for transfers.
        """
        if request.operation_type == OperationType.DEPOSIT:
            account_id = self._require(request.account_id, "account_id")
            return self.deposit(account_id, request.amount)
        elif request.operation_type == OperationType.WITHDRAWAL:
            account_id = self._require(request.account_id, "account_id")
            return self.withdraw(account_id, request.amount)
        elif request.operation_type == OperationType.TRANSFER:
            source_id = self._require(request.source_account_id, "source_account_id")
            target_id = self._require(request.target_account_id, "target_account_id")
            return self.transfer(source_id, target_id, request.amount)
        raise InvalidArgumentError("Unsupported operation type")

    @staticmethod
    def _require(value: str | None, attribute: str) -> str:
        if not value:
            raise InvalidArgumentError(f"{attribute} is required for this operation")
        return value

    def deposit(
        self, account_id: str, amount: Decimal, description: str | None = None
    ) -> Operation:
        """Credit an account and record a DEPOSIT operation."""
        logger.info(
            "Deposit of %s into account %s", amount, account_id,
            extra={"account_id": account_id, "amount": str(amount)},
        )
        operation = self._build_operation(
            account_id,
            OperationType.DEPOSIT,
            amount,
            description or operation_description(OperationType.DEPOSIT, amount),
        )

        account = self._get_account(account_id)
        if not can_deposit(account.balance, amount):
            logger.warning(
                "Deposit rejected for account %s: balance=%s amount=%s",
                account_id, account.balance, amount,
                extra={"account_id": account_id, "amount": str(amount)},
            )
            raise InvalidArgumentError(
                f"Deposit would take the balance above {MAX_AMOUNT}! "
                f"Balance={account.balance} Amount={amount}"
            )

        account.balance = account.balance + amount
        self.accounts.save(account)

        return self.operations.save(operation)

    def withdraw(
        self, account_id: str, amount: Decimal, description: str | None = None
    ) -> Operation:
        """
        Debit an account and record a WITHDRAWAL operation.

        Rejected with InsufficientBalanceError before anything is
        written when the balance does not cover the amount.
        """
        logger.info(
            "Withdrawal of %s from account %s", amount, account_id,
            extra={"account_id": account_id, "amount": str(amount)},
        )
        operation = self._build_operation(
            account_id,
            OperationType.WITHDRAWAL,
            amount,
            description or operation_description(OperationType.WITHDRAWAL, amount),
        )

        account = self._get_account(account_id)
        if not can_withdraw(account.balance, amount):
            logger.warning(
                "Withdrawal rejected for account %s: balance=%s amount=%s",
                account_id, account.balance, amount,
                extra={"account_id": account_id, "amount": str(amount)},
            )
            raise InsufficientBalanceError(
                f"Insufficient balance to withdraw! "
                f"Balance={account.balance} < Amount={amount}"
            )

        account.balance = account.balance - amount
        self.accounts.save(account)

        return self.operations.save(operation)

    def transfer(
        self, source_account_id: str, target_account_id: str, amount: Decimal
    ) -> Transfer:
        """
        Move money from one account to another.

        Both accounts are loaded and locked before the first leg
        runs, in id order so two opposite transfers cannot
        deadlock. A missing target is therefore rejected before
        the source is debited.
        """
        if source_account_id == target_account_id:
            raise InvalidArgumentError(SAME_SOURCE_AND_TARGET_ACCOUNT)

        logger.info(
            "Transfer of %s from account %s to account %s",
            amount, source_account_id, target_account_id,
            extra={
                "source_account_id": source_account_id,
                "target_account_id": target_account_id,
                "amount": str(amount),
            },
        )
        try:
            for account_id in sorted((source_account_id, target_account_id)):
                self._get_account(account_id)

            source_operation = self.withdraw(
                source_account_id,
                amount,
                transfer_description(amount, target_account_id, outgoing=True),
            )
            target_operation = self.deposit(
                target_account_id,
                amount,
                transfer_description(amount, source_account_id, outgoing=False),
            )
        except BankAccountError as e:
            logger.warning(
                "Transfer from %s to %s failed: %s",
                source_account_id, target_account_id, e,
            )
            raise

        return Transfer(
            source_operation=source_operation,
            target_operation=target_operation,
        )

    def delete_operation(self, operation_id: int) -> None:
        """
        Remove an operation from the account history.

        Administrative correction only: the account balance is
        left as it is.
        """
        logger.info("Deleting operation %s", operation_id)
        operation = self.operations.find_by_id(operation_id)
        if operation is None:
            logger.warning("Operation not found: %s", operation_id)
            raise OperationNotFoundError(operation_id)

        self.operations.delete(operation)
        logger.info("Deleted operation %s", operation_id)
