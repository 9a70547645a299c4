"""
Customer model.

Represents an account holder. A customer can own several
current and savings accounts.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bank_accounts.models.base import Base


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(30), nullable=False)

    # Deleting a customer removes their accounts and, through them,
    # their operations.
    accounts: Mapped[list["Account"]] = relationship(
        back_populates="customer", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Customer {self.id} {self.name}>"
