"""
Operation API endpoints.

The API layer is thin: it fixes the operation type for each
endpoint, commits on success and rolls back on error. A
transfer is committed once, after both legs succeed.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bank_accounts.exceptions import BankAccountError
from bank_accounts.models.base import get_db
from bank_accounts.models.enums import OperationType
from bank_accounts.services.operation_service import OperationService, Transfer
from bank_accounts.schemas.common import MessageResponse
from bank_accounts.schemas.operation import (
    OperationRequest,
    OperationResponse,
    TransferResponse,
)

router = APIRouter(prefix="/operations", tags=["Operations"])


def _to_response(result):
    if isinstance(result, Transfer):
        return TransferResponse(
            source_operation=OperationResponse.model_validate(result.source_operation),
            target_operation=OperationResponse.model_validate(result.target_operation),
        )
    return OperationResponse.model_validate(result)


def _process(db: Session, request: OperationRequest):
    service = OperationService(db)
    try:
        result = service.perform_operation(request)
        db.commit()
        return _to_response(result)
    except BankAccountError:
        db.rollback()
        raise


@router.post("", response_model=OperationResponse | TransferResponse)
def perform_operation(
    request: OperationRequest,
    db: Session = Depends(get_db),
):
    """Run the operation named by operation_type in the body."""
    return _process(db, request)


@router.post("/deposit", response_model=OperationResponse)
def deposit(
    request: OperationRequest,
    db: Session = Depends(get_db),
):
    """Deposit money into an account."""
    request.operation_type = OperationType.DEPOSIT
    return _process(db, request)


@router.post("/withdraw", response_model=OperationResponse)
def withdraw(
    request: OperationRequest,
    db: Session = Depends(get_db),
):
    """Withdraw money from an account."""
    request.operation_type = OperationType.WITHDRAWAL
    return _process(db, request)


@router.post("/transfer", response_model=TransferResponse)
def transfer(
    request: OperationRequest,
    db: Session = Depends(get_db),
):
    """Transfer money between two accounts."""
    request.operation_type = OperationType.TRANSFER
    return _process(db, request)


@router.delete("/{operation_id}", response_model=MessageResponse)
def delete_operation(operation_id: int, db: Session = Depends(get_db)):
    """
    Delete an operation.

    Administrative correction: the account balance is not
    adjusted.
    """
    service = OperationService(db)
    try:
        service.delete_operation(operation_id)
        db.commit()
    except BankAccountError:
        db.rollback()
        raise
    return MessageResponse(message="Operation successfully deleted.")
