"""
Input schemas for the dashboard write forms.
"""
from __future__ import annotations

import re
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class BookingInput(BaseModel):
    """New booking form."""
    full_name: str = Field(min_length=2, description="Guest full name")
    address: Optional[str] = Field(default=None, description="Guest address")
    phone_number: Optional[str] = Field(default=None, description="Guest phone number")
    email: str = Field(description="Guest e-mail address")
    start_date: date = Field(description="Check-in date (YYYY-MM-DD)")
    end_date: date = Field(description="Check-out date (YYYY-MM-DD)")
    property_item_type: str = Field(min_length=1, description="Room type")
    number_of_booked_property: int = Field(ge=1, description="Number of rooms")
    amount_paid: float = Field(default=0, ge=0, description="Amount already paid")

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Please enter a valid email address")
        return value

    @field_validator("amount_paid", mode="before")
    @classmethod
    def _blank_amount_is_zero(cls, value: Any) -> Any:
        return 0 if value == "" or value is None else value

    @model_validator(mode="after")
    def _end_after_start(self) -> "BookingInput":
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        return self


class ServiceInput(BaseModel):
    """Create or edit a hotel service."""
    name: str = Field(description="Service name")
    description: str = Field(description="Service description")
    amendment: str = Field(description="Amendment policy")
    is_active: bool = Field(description="Whether the service is offered")

    @field_validator("name", "description", "amendment")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("This field is required.")
        return value
