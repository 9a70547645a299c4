"""
Shared enumerations for database models.

Python enums mapped to database enums ensure that only
valid values can be stored.
"""

import enum


class AccountStatus(str, enum.Enum):
    """Lifecycle of a customer account."""
    CREATED = "CREATED"
    ACTIVATED = "ACTIVATED"
    SUSPENDED = "SUSPENDED"


class AccountType(str, enum.Enum):
    """
    Discriminator for the account subtypes.

    A closed set: adding a member means touching every
    dispatch over it.
    """
    CURRENT = "CURRENT"
    SAVINGS = "SAVINGS"


class OperationType(str, enum.Enum):
    """
    Kind of monetary movement.

    Stored operations are DEPOSIT or WITHDRAWAL only; a
    TRANSFER is recorded as one leg of each.
    """
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    TRANSFER = "TRANSFER"
