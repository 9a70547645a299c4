"""
Account models.

Current and savings accounts share one table. The
account_type column is the discriminator: SQLAlchemy reads it
to decide which subclass to load, and code that needs the
type-specific field dispatches on it explicitly rather than
inspecting the Python class.
"""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bank_accounts.models.base import Base, utcnow
from bank_accounts.models.enums import AccountStatus, AccountType


def new_account_id() -> str:
    return str(uuid.uuid4())


class Account(Base):
    """
    Common part of every account.

    Never instantiated directly: create a CurrentAccount or
    a SavingsAccount.
    """

    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_account_id
    )
    balance: Mapped[Decimal] = mapped_column(
        Numeric(19, 2), nullable=False, default=Decimal("0.00")
    )
    status: Mapped[AccountStatus] = mapped_column(
        SAEnum(
            AccountStatus,
            name="account_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=AccountStatus.CREATED,
    )
    account_type: Mapped[AccountType] = mapped_column(
        SAEnum(
            AccountType,
            name="account_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    customer_id: Mapped[int] = mapped_column(
        ForeignKey("customers.id"), nullable=False, index=True
    )
    created_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    modified_on: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None, onupdate=utcnow
    )

    # Relationships
    customer: Mapped["Customer"] = relationship(back_populates="accounts")
    operations: Mapped[list["Operation"]] = relationship(
        back_populates="account",
        order_by="Operation.operation_date",
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {
        "polymorphic_on": "account_type",
    }

    def __repr__(self) -> str:
        return (
            f"<Account {self.id} "
            f"{self.account_type.value} balance={self.balance}>"
        )


class CurrentAccount(Account):
    """Account with an overdraft limit."""

    overdraft_limit: Mapped[Decimal | None] = mapped_column(
        Numeric(19, 2), nullable=True
    )

    __mapper_args__ = {
        "polymorphic_identity": AccountType.CURRENT,
    }


class SavingsAccount(Account):
    """Account with an interest rate."""

    interest_rate: Mapped[Decimal | None] = mapped_column(
        Numeric(7, 4), nullable=True
    )

    __mapper_args__ = {
        "polymorphic_identity": AccountType.SAVINGS,
    }
