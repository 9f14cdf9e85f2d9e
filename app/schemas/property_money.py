"""PropertyMoney Pydantic schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from app.models.enums import MoneyType

# Identifiers are stored as signed 64-bit integers
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class PropertyMoneyBase(BaseModel):
    """Fields shared by requests and responses."""

    amount: Decimal = Field(Decimal("0.00"), max_digits=21, decimal_places=2)
    currency: str = "USD"
    money_type: MoneyType = MoneyType.OTHER
    description: str | None = Field(None, max_length=255)
    property_name: str | None = Field(None, max_length=100)


class PropertyMoneyPayload(PropertyMoneyBase):
    """Request body for create and update.

    ``id`` must be absent on create and present on update; the routes
    enforce that, not the schema.
    """

    id: int | None = Field(None, ge=MIN_ID, le=MAX_ID)

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Currency must be a three-letter code."""
        code = v.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError("Currency must be a three-letter code")
        return code


class PropertyMoneyResponse(PropertyMoneyBase):
    """Schema for property money response."""

    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
