"""
Entity validation before persistence.

Request bodies are validated by FastAPI on the way in. This
service re-checks the entities the services build, so a
constraint holds even when a service is called directly.
"""

import logging

from pydantic import BaseModel, ValidationError

from bank_accounts.exceptions import ValidationFailedError
from bank_accounts.models.customer import Customer
from bank_accounts.models.operation import Operation
from bank_accounts.schemas.common import invalid_params_from_errors
from bank_accounts.schemas.customer import CustomerRequest
from bank_accounts.schemas.operation import OperationRecord

logger = logging.getLogger(__name__)


class ValidationService:
    """Stateless: holds no data between calls."""

    def validate_operation(self, operation: Operation) -> None:
        self._validate(OperationRecord, operation, "Operation")

    def validate_customer(self, customer: Customer) -> None:
        self._validate(CustomerRequest, customer, "Customer")

    def _validate(self, schema: type[BaseModel], entity, entity_name: str) -> None:
        try:
            schema.model_validate(entity)
        except ValidationError as e:
            invalid_params = invalid_params_from_errors(e.errors())
            logger.warning(
                "Validation failed for %s: %s", entity_name,
                ", ".join(f"{p.attribute}: {p.cause}" for p in invalid_params),
            )
            raise ValidationFailedError(entity_name, invalid_params) from e
        logger.debug("Validation successful for %s", entity_name)
