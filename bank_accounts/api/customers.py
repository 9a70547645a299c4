"""
Customer API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bank_accounts.exceptions import BankAccountError
from bank_accounts.models.base import get_db
from bank_accounts.services.customer_service import CustomerService
from bank_accounts.schemas.account import AccountResponse
from bank_accounts.schemas.common import MessageResponse
from bank_accounts.schemas.customer import CustomerRequest, CustomerResponse
from bank_accounts.schemas.operation import OperationResponse

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=list[CustomerResponse])
def list_customers(db: Session = Depends(get_db)):
    """List all customers."""
    return CustomerService(db).list_customers()


@router.get("/search", response_model=list[CustomerResponse])
def search_customers(name: str, db: Session = Depends(get_db)):
    """Customers whose name contains the given text, ignoring case."""
    return CustomerService(db).search_customers(name)


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    return CustomerService(db).get_customer(customer_id)


@router.post("", response_model=CustomerResponse, status_code=201)
def create_customer(
    request: CustomerRequest,
    db: Session = Depends(get_db),
):
    """Create a new customer."""
    service = CustomerService(db)
    try:
        customer = service.create_customer(request)
        db.commit()
        return customer
    except BankAccountError:
        db.rollback()
        raise


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    request: CustomerRequest,
    db: Session = Depends(get_db),
):
    service = CustomerService(db)
    try:
        customer = service.update_customer(customer_id, request)
        db.commit()
        return customer
    except BankAccountError:
        db.rollback()
        raise


@router.delete("/{customer_id}", response_model=MessageResponse)
def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    """Delete a customer together with their accounts and operations."""
    service = CustomerService(db)
    try:
        service.delete_customer(customer_id)
        db.commit()
    except BankAccountError:
        db.rollback()
        raise
    return MessageResponse(message="Customer successfully deleted.")


@router.get("/{customer_id}/accounts", response_model=list[AccountResponse])
def get_customer_accounts(customer_id: int, db: Session = Depends(get_db)):
    accounts = CustomerService(db).get_accounts(customer_id)
    return [AccountResponse.from_account(a) for a in accounts]


@router.get("/{customer_id}/operations", response_model=list[OperationResponse])
def get_customer_operations(customer_id: int, db: Session = Depends(get_db)):
    """Operations across all of the customer's accounts, newest first."""
    return CustomerService(db).get_operations(customer_id)
