"""Business logic services."""

from bank_accounts.services.account_service import AccountService
from bank_accounts.services.customer_service import CustomerService
from bank_accounts.services.operation_service import OperationService, Transfer
from bank_accounts.services.validation_service import ValidationService

__all__ = [
    "AccountService",
    "CustomerService",
    "OperationService",
    "Transfer",
    "ValidationService",
]
