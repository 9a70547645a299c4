"""
Customer service: customer CRUD plus the accounts and
operations a customer owns.
"""

import logging

from sqlalchemy.orm import Session

from bank_accounts.exceptions import CustomerNotFoundError
from bank_accounts.models.account import Account
from bank_accounts.models.customer import Customer
from bank_accounts.models.operation import Operation
from bank_accounts.schemas.customer import CustomerRequest
from bank_accounts.services.validation_service import ValidationService
from bank_accounts.stores import AccountStore, CustomerStore, OperationStore

logger = logging.getLogger(__name__)


class CustomerService:

    def __init__(self, db: Session, validation_service: ValidationService | None = None):
        self.db = db
        self.customers = CustomerStore(db)
        self.accounts = AccountStore(db)
        self.operations = OperationStore(db)
        self.validation_service = validation_service or ValidationService()

    def list_customers(self) -> list[Customer]:
        customers = self.customers.find_all()
        logger.info("Retrieved %d customers", len(customers))
        return customers

    def get_customer(self, customer_id: int) -> Customer:
        """Get a customer by ID."""
        customer = self.customers.find_by_id(customer_id)
        if customer is None:
            logger.warning("Customer not found: %s", customer_id)
            raise CustomerNotFoundError(customer_id)
        return customer

    def search_customers(self, name: str) -> list[Customer]:
        """Customers whose name contains `name`, ignoring case."""
        customers = self.customers.find_by_name_contains(name)
        logger.info("Retrieved %d customers with name containing %r", len(customers), name)
        return customers

    def create_customer(self, request: CustomerRequest) -> Customer:
        logger.info("Saving new customer %s", request.name)
        customer = Customer(name=request.name, email=request.email)
        self.validation_service.validate_customer(customer)
        return self.customers.save(customer)

    def update_customer(self, customer_id: int, request: CustomerRequest) -> Customer:
        logger.info("Updating customer %s", customer_id)
        customer = self.get_customer(customer_id)
        customer.name = request.name
        customer.email = request.email
        self.validation_service.validate_customer(customer)
        return self.customers.save(customer)

    def delete_customer(self, customer_id: int) -> None:
        """Delete a customer, their accounts and those accounts' operations."""
        logger.info("Deleting customer %s", customer_id)
        customer = self.get_customer(customer_id)
        self.customers.delete(customer)

    def get_accounts(self, customer_id: int) -> list[Account]:
        self.get_customer(customer_id)
        return self.accounts.find_by_customer_id(customer_id)

    def get_operations(self, customer_id: int) -> list[Operation]:
        """Operations across all of a customer's accounts, newest first."""
        self.get_customer(customer_id)
        return self.operations.find_by_customer_id(customer_id)
