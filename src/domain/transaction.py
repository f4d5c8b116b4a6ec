"""Transaction Domain Entity

Immutable append-only ledger of balance changes on a card.
Each transaction records the card balance right after it was applied.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, ForeignKey, Numeric, String, func
from src.domain.base import BaseModel, IdType


class TransactionType(str, Enum):
    """Card transaction types"""
    TOPUP = "topup"    # Balance increased
    SPEND = "spend"    # Balance decreased at the pump


class Transaction(BaseModel, table=True):
    """
    Transaction - Immutable record of a card balance mutation

    Domain Rules:
    - Transactions are immutable (append-only)
    - amount is always positive; the type gives the direction
    - new_balance is the card balance immediately after this transaction
    - fuel_price and liters are only set for SPEND
    - transaction_date is the history ordering key (newest first)
    """

    __tablename__ = "transactions"
    __table_args__ = (
        Index('ix_transactions_card_date', 'card_id', 'transaction_date'),
    )

    transaction_id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique transaction identifier (auto-increment)"
    )

    card_id: int = Field(
        sa_column=Column(IdType, ForeignKey("cards.card_id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Card"
    )

    transaction_type: TransactionType = Field(
        sa_column=Column(String(10), nullable=False),
        description="Type of transaction (topup, spend)"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Transaction amount, always > 0 (precision: 18,6)"
    )

    new_balance: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Card balance after this transaction"
    )

    fuel_price: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Fuel price per liter (spend only)"
    )

    liters: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Liters bought, amount / fuel_price (spend only)"
    )

    transaction_date: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False, server_default=func.now()),
        description="Transaction timestamp (immutable)"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "transaction_id": 2,
                "card_id": 1,
                "transaction_type": "spend",
                "amount": "30.000000",
                "new_balance": "120.000000",
                "fuel_price": "1.500000",
                "liters": "20.000000",
                "transaction_date": "2024-01-01T00:00:00"
            }
        }
