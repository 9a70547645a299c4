"""
Balance rules for debits and credits.
"""

from decimal import Decimal

from bank_accounts.schemas.common import MAX_AMOUNT


def can_withdraw(balance: Decimal, amount: Decimal) -> bool:
    """
    True when `amount` can be taken out of `balance`.

    The overdraft limit of current accounts is not taken into
    account: every account type is held to a balance of zero.
    """
    return amount <= balance


def can_deposit(balance: Decimal, amount: Decimal) -> bool:
    """True when crediting `amount` keeps `balance` within MAX_AMOUNT."""
    return balance + amount <= MAX_AMOUNT
