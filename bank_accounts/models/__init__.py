"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from bank_accounts.models.base import Base
from bank_accounts.models.enums import (
    AccountStatus,
    AccountType,
    OperationType,
)
from bank_accounts.models.customer import Customer
from bank_accounts.models.account import Account, CurrentAccount, SavingsAccount
from bank_accounts.models.operation import Operation

__all__ = [
    "Base",
    "AccountStatus",
    "AccountType",
    "OperationType",
    "Customer",
    "Account",
    "CurrentAccount",
    "SavingsAccount",
    "Operation",
]
