"""Card Domain Entity

A fuel card holding a monetary balance. Balance changes only through
Transactions (top-up and spend) and is never negative.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Numeric, String
from src.domain.base import BaseModel, IdType


class Card(BaseModel, table=True):
    """
    Card - Fuel card with a fixed-point balance

    Domain Rules:
    - card_id is generated by storage on creation
    - Balance must be non-negative (checked by use cases before mutation)
    - Balance is stored with fixed-point semantics (precision: 18,6)
    """

    __tablename__ = "cards"
    __table_args__ = (
        CheckConstraint('balance >= 0', name='card_balance_non_negative'),
    )

    card_id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique card identifier (auto-increment)"
    )

    card_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Card display name"
    )

    balance: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Current balance (must be >= 0, precision: 18,6)"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "card_id": 1,
                "card_name": "Alice",
                "balance": "100.000000"
            }
        }
