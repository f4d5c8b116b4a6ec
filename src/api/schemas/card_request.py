"""Request schemas for Card API

Pydantic models for incoming HTTP bodies. Fields are typed but not
range-checked here: amount/fuel_price/name/balance rules live in the use
cases so they answer with the same error messages for every client.
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class TopUpRequestSchema(BaseModel):
    """
    Request schema for topping up a card

    Used for POST /cards/{card_id}/topup endpoint.
    """

    amount: Optional[Decimal] = Field(
        default=None,
        description="Amount to add (must be > 0)"
    )

    class Config:
        json_schema_extra = {"example": {"amount": "50.00"}}


class SpendRequestSchema(BaseModel):
    """
    Request schema for spending from a card

    Used for POST /cards/{card_id}/spend endpoint.
    """

    amount: Optional[Decimal] = Field(
        default=None,
        description="Amount to spend (must be > 0)"
    )

    fuel_price: Optional[Decimal] = Field(
        default=None,
        description="Fuel price per liter (must be > 0)"
    )

    class Config:
        json_schema_extra = {"example": {"amount": "30.00", "fuel_price": "1.50"}}


class AddCardRequestSchema(BaseModel):
    """
    Request schema for creating a card

    Used for POST /cards/add endpoint.
    """

    name: Optional[str] = Field(
        default=None,
        description="Card display name (required, non-empty)"
    )

    balance: Optional[Decimal] = Field(
        default=None,
        description="Initial balance (required, >= 0)"
    )

    class Config:
        json_schema_extra = {"example": {"name": "Alice", "balance": "100.00"}}
