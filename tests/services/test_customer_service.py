"""
Tests for the CustomerService.
"""

from decimal import Decimal

import pytest

from bank_accounts.exceptions import CustomerNotFoundError, ValidationFailedError
from bank_accounts.models.customer import Customer
from bank_accounts.models.enums import AccountType
from bank_accounts.schemas.customer import CustomerRequest
from bank_accounts.services.customer_service import CustomerService
from bank_accounts.services.operation_service import OperationService


class TestCustomerCrud:

    def test_create_customer(self, db_session):
        service = CustomerService(db_session)
        customer = service.create_customer(CustomerRequest(name="Bob", email="bob@bank.com"))
        db_session.commit()

        assert customer.id is not None
        assert customer.name == "Bob"

    def test_get_unknown_customer(self, db_session):
        with pytest.raises(CustomerNotFoundError, match="Customer not found with ID : 7"):
            CustomerService(db_session).get_customer(7)

    def test_update_customer(self, db_session, customer):
        service = CustomerService(db_session)
        updated = service.update_customer(
            customer.id, CustomerRequest(name="Alicia", email="alicia@bank.com")
        )
        db_session.commit()

        assert updated.name == "Alicia"
        assert updated.email == "alicia@bank.com"

    def test_update_unknown_customer(self, db_session):
        with pytest.raises(CustomerNotFoundError):
            CustomerService(db_session).update_customer(
                99, CustomerRequest(name="Bob", email="bob@bank.com")
            )

    def test_delete_customer_removes_accounts(self, db_session, customer, make_account):
        account = make_account("10.00")
        OperationService(db_session).deposit(account.id, Decimal("5.00"))
        db_session.commit()
        customer_id = customer.id

        service = CustomerService(db_session)
        service.delete_customer(customer_id)
        db_session.commit()

        assert db_session.get(Customer, customer_id) is None
        assert service.list_customers() == []

    def test_list_customers(self, db_session, customer):
        CustomerService(db_session).create_customer(
            CustomerRequest(name="Bob", email="bob@bank.com")
        )
        db_session.commit()

        names = [c.name for c in CustomerService(db_session).list_customers()]
        assert names == ["Alice", "Bob"]

    def test_search_is_case_insensitive(self, db_session, customer):
        service = CustomerService(db_session)
        service.create_customer(CustomerRequest(name="Bob", email="bob@bank.com"))
        db_session.commit()

        assert [c.name for c in service.search_customers("LIC")] == ["Alice"]
        assert service.search_customers("zzz") == []


class TestCustomerValidation:

    def test_entity_rechecked_before_save(self, db_session):
        """A request built without validation is still caught."""
        request = CustomerRequest.model_construct(name="B0b", email="bob@bank.com")

        with pytest.raises(ValidationFailedError) as exc_info:
            CustomerService(db_session).create_customer(request)

        params = exc_info.value.invalid_params
        assert params[0].attribute == "name"
        assert params[0].cause == "Name should only contain alphabetic characters."


class TestCustomerAccountsAndOperations:

    def test_get_accounts(self, db_session, customer, make_account):
        make_account("1.00")
        make_account("2.00", AccountType.SAVINGS)

        accounts = CustomerService(db_session).get_accounts(customer.id)
        assert {a.account_type for a in accounts} == {AccountType.CURRENT, AccountType.SAVINGS}

    def test_get_accounts_unknown_customer(self, db_session):
        with pytest.raises(CustomerNotFoundError):
            CustomerService(db_session).get_accounts(5)

    def test_get_operations_across_accounts(self, db_session, customer, make_account):
        source = make_account("100.00")
        target = make_account("0.00", AccountType.SAVINGS)
        OperationService(db_session).transfer(source.id, target.id, Decimal("30.00"))
        db_session.commit()

        operations = CustomerService(db_session).get_operations(customer.id)
        assert len(operations) == 2
        assert {op.account_id for op in operations} == {source.id, target.id}
