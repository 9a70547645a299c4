"""
Persistence stores.

Thin wrappers around a SQLAlchemy session, one per
aggregate. Services depend on these rather than on raw
queries. Stores only flush: the caller owns the transaction
and decides when to commit or roll back.
"""

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from bank_accounts.models.account import Account
from bank_accounts.models.customer import Customer
from bank_accounts.models.operation import Operation


class AccountStore:

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, account_id: str, for_update: bool = False) -> Account | None:
        """
        Load one account, or None.

        for_update=True issues SELECT ... FOR UPDATE so concurrent
        balance changes on the same row are serialized by the
        database. Dialects without row locks (SQLite) ignore it.
        """
        query = select(Account).where(Account.id == account_id)
        if for_update:
            query = query.with_for_update()
        return self.db.execute(query).scalar_one_or_none()

    def find_all(self) -> list[Account]:
        accounts = self.db.execute(
            select(Account).order_by(Account.created_on)
        ).scalars().all()
        return list(accounts)

    def find_by_customer_id(self, customer_id: int) -> list[Account]:
        accounts = self.db.execute(
            select(Account)
            .where(Account.customer_id == customer_id)
            .order_by(Account.created_on)
        ).scalars().all()
        return list(accounts)

    def save(self, account: Account) -> Account:
        self.db.add(account)
        self.db.flush()
        return account

    def delete(self, account: Account) -> None:
        self.db.delete(account)
        self.db.flush()


class OperationStore:

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, operation_id: int) -> Operation | None:
        return self.db.get(Operation, operation_id)

    def find_by_account_id(
        self, account_id: str, page: int | None = None, size: int | None = None
    ) -> list[Operation]:
        """Operations of one account, newest first, optionally paged."""
        query = (
            select(Operation)
            .where(Operation.account_id == account_id)
            .order_by(Operation.operation_date.desc(), Operation.id.desc())
        )
        if page is not None and size is not None:
            query = query.offset(page * size).limit(size)
        return list(self.db.execute(query).scalars().all())

    def count_by_account_id(self, account_id: str) -> int:
        return self.db.execute(
            select(func.count(Operation.id)).where(
                Operation.account_id == account_id
            )
        ).scalar_one()

    def find_by_customer_id(self, customer_id: int) -> list[Operation]:
        operations = self.db.execute(
            select(Operation)
            .join(Operation.account)
            .where(Account.customer_id == customer_id)
            .order_by(Operation.operation_date.desc(), Operation.id.desc())
        ).scalars().all()
        return list(operations)

    def save(self, operation: Operation) -> Operation:
        self.db.add(operation)
        self.db.flush()
        return operation

    def delete(self, operation: Operation) -> None:
        self.db.delete(operation)
        self.db.flush()


class CustomerStore:

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, customer_id: int) -> Customer | None:
        return self.db.get(Customer, customer_id)

    def find_all(self) -> list[Customer]:
        customers = self.db.execute(
            select(Customer).order_by(Customer.id)
        ).scalars().all()
        return list(customers)

    def find_by_name_contains(self, keyword: str) -> list[Customer]:
        """Case-insensitive substring match on the customer name."""
        customers = self.db.execute(
            select(Customer)
            .where(func.lower(Customer.name).contains(keyword.lower()))
            .order_by(Customer.id)
        ).scalars().all()
        return list(customers)

    def save(self, customer: Customer) -> Customer:
        self.db.add(customer)
        self.db.flush()
        return customer

    def delete(self, customer: Customer) -> None:
        self.db.delete(customer)
        self.db.flush()
