"""
Operation model.

One row per monetary movement against one account. A
transfer produces two rows: a WITHDRAWAL on the source and
a DEPOSIT on the target. Operations are append-only; the
only way to remove one is the administrative delete.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bank_accounts.models.base import Base, utcnow
from bank_accounts.models.enums import OperationType


class Operation(Base):
    __tablename__ = "operations"

    id: Mapped[int] = mapped_column(primary_key=True)
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 2), nullable=False
    )
    operation_type: Mapped[OperationType] = mapped_column(
        SAEnum(
            OperationType,
            name="operation_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    operation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True
    )
    description: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    account_id: Mapped[str] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )

    account: Mapped["Account"] = relationship(back_populates="operations")

    def __repr__(self) -> str:
        return (
            f"<Operation {self.id} {self.operation_type.value} "
            f"{self.amount} account={self.account_id}>"
        )
