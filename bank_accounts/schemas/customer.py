"""
Pydantic schemas for customers.
"""

import re

from pydantic import BaseModel, field_validator


NAME_PATTERN = re.compile(r"^[a-zA-Z]+$")
EMAIL_PATTERN = re.compile(
    r"^(?=.{2,30}@)[A-Za-z0-9_-]+(\.[A-Za-z0-9_-]+)*"
    r"@[^-][A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*(\.[A-Za-z]{2,3})$"
)


class CustomerRequest(BaseModel):
    """
    Customer fields as sent on create and update.

    Also used by the ValidationService to check a Customer
    entity before it is saved, hence from_attributes.
    """
    name: str
    email: str

    model_config = {"from_attributes": True}

    @field_validator("name")
    @classmethod
    def name_must_be_alphabetic(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name cannot be null or empty.")
        if not 2 <= len(v) <= 20:
            raise ValueError("Name must be between 2 and 20 characters.")
        if not NAME_PATTERN.match(v):
            raise ValueError("Name should only contain alphabetic characters.")
        return v

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Email cannot be null or empty.")
        if len(v) > 30:
            raise ValueError("Email cannot exceed 30 characters.")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Email should be valid.")
        return v


class CustomerResponse(BaseModel):
    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}
