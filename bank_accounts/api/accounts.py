"""
Account API endpoints.

Current and savings accounts have their own create and
update endpoints since their bodies differ; everything else
is shared.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from bank_accounts.exceptions import BankAccountError
from bank_accounts.models.base import get_db
from bank_accounts.models.enums import AccountType
from bank_accounts.services.account_service import AccountService
from bank_accounts.schemas.account import (
    AccountRequest,
    AccountResponse,
    CurrentAccountRequest,
    SavingsAccountRequest,
)
from bank_accounts.schemas.common import MessageResponse
from bank_accounts.schemas.operation import (
    AccountDetailsResponse,
    AccountHistoryResponse,
    OperationResponse,
)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


def _create(
    db: Session, customer_id: int, account_type: AccountType, request: AccountRequest
) -> AccountResponse:
    service = AccountService(db)
    try:
        account = service.create_account(customer_id, account_type, request)
        db.commit()
        return AccountResponse.from_account(account)
    except BankAccountError:
        db.rollback()
        raise


def _update(
    db: Session, account_id: str, account_type: AccountType, request: AccountRequest
) -> AccountResponse:
    service = AccountService(db)
    try:
        account = service.update_account(account_id, account_type, request)
        db.commit()
        return AccountResponse.from_account(account)
    except BankAccountError:
        db.rollback()
        raise


@router.get("", response_model=list[AccountResponse])
def list_accounts(db: Session = Depends(get_db)):
    return [AccountResponse.from_account(a) for a in AccountService(db).list_accounts()]


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(account_id: str, db: Session = Depends(get_db)):
    """Get account details."""
    return AccountResponse.from_account(AccountService(db).get_account(account_id))


@router.get("/{account_id}/details", response_model=AccountDetailsResponse)
def get_account_details(account_id: str, db: Session = Depends(get_db)):
    """Account together with all of its operations, newest first."""
    service = AccountService(db)
    account = service.get_account(account_id)
    return AccountDetailsResponse(
        account=AccountResponse.from_account(account),
        operations=[
            OperationResponse.model_validate(op)
            for op in service.get_operations(account_id)
        ],
    )


@router.post("/current/{customer_id}", response_model=AccountResponse, status_code=201)
def create_current_account(
    customer_id: int,
    request: CurrentAccountRequest,
    db: Session = Depends(get_db),
):
    """Open a current account. It starts in CREATED status."""
    return _create(db, customer_id, AccountType.CURRENT, request)


@router.post("/savings/{customer_id}", response_model=AccountResponse, status_code=201)
def create_savings_account(
    customer_id: int,
    request: SavingsAccountRequest,
    db: Session = Depends(get_db),
):
    """Open a savings account. It starts in CREATED status."""
    return _create(db, customer_id, AccountType.SAVINGS, request)


@router.put("/current/{account_id}", response_model=AccountResponse)
def update_current_account(
    account_id: str,
    request: CurrentAccountRequest,
    db: Session = Depends(get_db),
):
    return _update(db, account_id, AccountType.CURRENT, request)


@router.put("/savings/{account_id}", response_model=AccountResponse)
def update_savings_account(
    account_id: str,
    request: SavingsAccountRequest,
    db: Session = Depends(get_db),
):
    return _update(db, account_id, AccountType.SAVINGS, request)


@router.delete("/{account_id}", response_model=MessageResponse)
def delete_account(account_id: str, db: Session = Depends(get_db)):
    service = AccountService(db)
    try:
        service.delete_account(account_id)
        db.commit()
    except BankAccountError:
        db.rollback()
        raise
    return MessageResponse(message="Account deleted successfully.")


@router.get("/{account_id}/operations", response_model=list[OperationResponse])
def get_account_operations(account_id: str, db: Session = Depends(get_db)):
    return AccountService(db).get_operations(account_id)


@router.get("/{account_id}/history", response_model=AccountHistoryResponse)
def get_account_history(
    account_id: str,
    page: int = Query(default=0, ge=0),
    size: int = Query(default=5, ge=1),
    db: Session = Depends(get_db),
):
    """One page of the account's operations, newest first."""
    history = AccountService(db).account_history(account_id, page, size)
    return AccountHistoryResponse(
        account=AccountResponse.from_account(history.account),
        current_page=history.current_page,
        total_pages=history.total_pages,
        page_size=history.page_size,
        operations=[OperationResponse.model_validate(op) for op in history.operations],
    )
