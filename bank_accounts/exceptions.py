"""
Exception hierarchy for the bank accounts service.

Services raise these; the API layer maps each one to an
HTTP status code in api/errors.py. Nothing here knows
about HTTP.
"""

from dataclasses import dataclass


ACCOUNT_NOT_FOUND = "Could not find account with ID : "
CUSTOMER_NOT_FOUND = "Customer not found with ID : "
OPERATION_NOT_FOUND = "Could not find operation with ID : "
SAME_SOURCE_AND_TARGET_ACCOUNT = "Source and target accounts cannot be the same"


@dataclass(frozen=True)
class InvalidParam:
    """One failed constraint: what went wrong and on which attribute."""
    cause: str
    attribute: str


class BankAccountError(Exception):
    """Base exception for all bank account errors."""


class AccountNotFoundError(BankAccountError):
    """Raised when an account id does not resolve."""

    def __init__(self, account_id):
        self.account_id = account_id
        super().__init__(f"{ACCOUNT_NOT_FOUND}{account_id}")


class CustomerNotFoundError(BankAccountError):
    """Raised when a customer id does not resolve."""

    def __init__(self, customer_id):
        self.customer_id = customer_id
        super().__init__(f"{CUSTOMER_NOT_FOUND}{customer_id}")


class OperationNotFoundError(BankAccountError):
    """Raised when an operation id does not resolve."""

    def __init__(self, operation_id):
        self.operation_id = operation_id
        super().__init__(f"{OPERATION_NOT_FOUND}{operation_id}")


class InsufficientBalanceError(BankAccountError):
    """Raised when a withdrawal or transfer debit exceeds the balance."""


class InvalidArgumentError(BankAccountError):
    """
    Raised for arguments that are well-typed but unusable:
    same source and target on a transfer, a missing account
    id for the requested operation, a malformed UUID.
    """

    def __init__(self, message: str, invalid_params: list[InvalidParam] | None = None):
        self.invalid_params = invalid_params or []
        super().__init__(message)


class ValidationFailedError(BankAccountError):
    """Raised when an entity violates field constraints before persistence."""

    def __init__(self, entity_name: str, invalid_params: list[InvalidParam]):
        self.entity_name = entity_name
        self.invalid_params = invalid_params
        super().__init__(f"Validation failed for {entity_name}")
