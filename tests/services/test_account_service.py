"""
Tests for the AccountService.
"""

import uuid
from decimal import Decimal

import pytest

from bank_accounts.exceptions import (
    AccountNotFoundError,
    CustomerNotFoundError,
    InvalidArgumentError,
)
from bank_accounts.models.account import CurrentAccount, SavingsAccount
from bank_accounts.models.enums import AccountStatus, AccountType
from bank_accounts.schemas.account import CurrentAccountRequest, SavingsAccountRequest
from bank_accounts.services.account_service import AccountService
from bank_accounts.services.operation_service import OperationService


class TestCreateAccount:

    def test_create_current_account(self, db_session, customer):
        service = AccountService(db_session)
        account = service.create_account(
            customer.id,
            AccountType.CURRENT,
            CurrentAccountRequest(balance=Decimal("10.00"), overdraft_limit=Decimal("250.00")),
        )
        db_session.commit()

        assert isinstance(account, CurrentAccount)
        assert account.account_type == AccountType.CURRENT
        assert account.overdraft_limit == Decimal("250.00")
        assert account.balance == Decimal("10.00")
        assert account.customer_id == customer.id

    def test_create_savings_account(self, db_session, customer):
        service = AccountService(db_session)
        account = service.create_account(
            customer.id,
            AccountType.SAVINGS,
            SavingsAccountRequest(interest_rate=Decimal("0.0350")),
        )
        db_session.commit()

        assert isinstance(account, SavingsAccount)
        assert account.account_type == AccountType.SAVINGS
        assert account.interest_rate == Decimal("0.0350")

    def test_new_account_gets_uuid_and_created_status(self, db_session, customer):
        account = AccountService(db_session).create_account(
            customer.id, AccountType.CURRENT, CurrentAccountRequest()
        )
        db_session.commit()

        assert str(uuid.UUID(account.id)) == account.id
        assert account.status == AccountStatus.CREATED
        assert account.created_on is not None

    def test_requested_status_ignored_on_create(self, db_session, customer):
        account = AccountService(db_session).create_account(
            customer.id,
            AccountType.CURRENT,
            CurrentAccountRequest(status=AccountStatus.ACTIVATED),
        )
        assert account.status == AccountStatus.CREATED

    def test_unknown_customer_rejected(self, db_session):
        with pytest.raises(CustomerNotFoundError, match="42"):
            AccountService(db_session).create_account(
                42, AccountType.CURRENT, CurrentAccountRequest()
            )

    def test_stored_type_is_read_back(self, db_session, customer):
        """The discriminator column decides which class is loaded."""
        service = AccountService(db_session)
        account = service.create_account(
            customer.id, AccountType.SAVINGS, SavingsAccountRequest()
        )
        db_session.commit()
        account_id = account.id
        db_session.expunge_all()

        loaded = service.get_account(account_id)
        assert isinstance(loaded, SavingsAccount)
        assert loaded.account_type == AccountType.SAVINGS


class TestUpdateAccount:

    def test_update_current_account(self, db_session, make_account):
        account = make_account("10.00", AccountType.CURRENT)
        service = AccountService(db_session)

        updated = service.update_account(
            account.id,
            AccountType.CURRENT,
            CurrentAccountRequest(
                balance=Decimal("99.00"),
                overdraft_limit=Decimal("500.00"),
                status=AccountStatus.ACTIVATED,
            ),
        )
        db_session.commit()

        assert updated.balance == Decimal("99.00")
        assert updated.overdraft_limit == Decimal("500.00")
        assert updated.status == AccountStatus.ACTIVATED
        assert updated.modified_on is not None

    def test_update_keeps_status_when_not_given(self, db_session, make_account):
        account = make_account("10.00", AccountType.SAVINGS)
        updated = AccountService(db_session).update_account(
            account.id,
            AccountType.SAVINGS,
            SavingsAccountRequest(balance=Decimal("10.00"), interest_rate=Decimal("0.0100")),
        )
        assert updated.status == AccountStatus.CREATED
        assert updated.interest_rate == Decimal("0.0100")

    def test_type_mismatch_rejected(self, db_session, make_account):
        account = make_account("10.00", AccountType.SAVINGS)
        with pytest.raises(InvalidArgumentError, match="SAVINGS"):
            AccountService(db_session).update_account(
                account.id, AccountType.CURRENT, CurrentAccountRequest()
            )

    def test_unknown_account_rejected(self, db_session):
        with pytest.raises(AccountNotFoundError):
            AccountService(db_session).update_account(
                "missing", AccountType.CURRENT, CurrentAccountRequest()
            )


class TestReadAndDelete:

    def test_list_accounts(self, db_session, make_account):
        make_account("1.00")
        make_account("2.00", AccountType.SAVINGS)

        accounts = AccountService(db_session).list_accounts()
        assert len(accounts) == 2

    def test_list_accounts_empty(self, db_session):
        assert AccountService(db_session).list_accounts() == []

    def test_get_unknown_account(self, db_session):
        with pytest.raises(AccountNotFoundError, match="Could not find account"):
            AccountService(db_session).get_account("nope")

    def test_delete_account_removes_its_operations(self, db_session, make_account):
        account = make_account("0.00")
        OperationService(db_session).deposit(account.id, Decimal("10.00"))
        db_session.commit()
        account_id = account.id

        service = AccountService(db_session)
        service.delete_account(account_id)
        db_session.commit()

        with pytest.raises(AccountNotFoundError):
            service.get_account(account_id)

    def test_get_operations_newest_first(self, db_session, make_account):
        account = make_account("0.00")
        ops = OperationService(db_session)
        first = ops.deposit(account.id, Decimal("1.00"))
        second = ops.deposit(account.id, Decimal("2.00"))
        db_session.commit()

        operations = AccountService(db_session).get_operations(account.id)
        assert [op.id for op in operations] == [second.id, first.id]


class TestAccountHistory:

    def _account_with_operations(self, db_session, make_account, count):
        account = make_account("0.00")
        service = OperationService(db_session)
        for i in range(count):
            service.deposit(account.id, Decimal(f"{i + 1}.00"))
        db_session.commit()
        return account

    def test_first_page(self, db_session, make_account):
        account = self._account_with_operations(db_session, make_account, 7)

        history = AccountService(db_session).account_history(account.id, page=0, size=5)

        assert history.current_page == 0
        assert history.page_size == 5
        assert history.total_pages == 2
        assert len(history.operations) == 5
        assert history.operations[0].amount == Decimal("7.00")

    def test_last_page(self, db_session, make_account):
        account = self._account_with_operations(db_session, make_account, 7)

        history = AccountService(db_session).account_history(account.id, page=1, size=5)

        assert [op.amount for op in history.operations] == [Decimal("2.00"), Decimal("1.00")]

    def test_no_operations(self, db_session, make_account):
        account = make_account("0.00")
        history = AccountService(db_session).account_history(account.id)
        assert history.total_pages == 0
        assert history.operations == []

    def test_malformed_id_rejected(self, db_session):
        with pytest.raises(InvalidArgumentError) as exc_info:
            AccountService(db_session).account_history("not-a-uuid")

        params = exc_info.value.invalid_params
        assert params[0].attribute == "accountId"

    def test_unknown_id_rejected(self, db_session):
        with pytest.raises(AccountNotFoundError):
            AccountService(db_session).account_history(str(uuid.uuid4()))

    def test_bad_page_size_rejected(self, db_session, make_account):
        account = make_account("0.00")
        with pytest.raises(InvalidArgumentError):
            AccountService(db_session).account_history(account.id, page=0, size=0)
