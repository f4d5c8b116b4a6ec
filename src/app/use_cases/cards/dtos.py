"""Data Transfer Objects for Card Use Cases

Pydantic models for command inputs and response outputs.
Decimal fields serialize as strings to keep fixed-point precision on the wire.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class CardDTO(BaseModel):
    """Card as stored"""

    card_id: int = Field(..., description="Card identifier")
    card_name: str = Field(..., description="Card display name")
    balance: Decimal = Field(..., description="Current balance")

    class Config:
        json_schema_extra = {
            "example": {"card_id": 1, "card_name": "Alice", "balance": "100.000000"}
        }


class CardInfoResponseDTO(BaseModel):
    """
    Response DTO for card info

    Returned by GetCardInfo use case.
    """

    card_id: int = Field(..., description="Card identifier")
    balance: Decimal = Field(..., description="Current balance")
    card_name: str = Field(..., description="Card display name")


class TopUpCommandDTO(BaseModel):
    """
    Command DTO for topping up a card

    amount is validated by the TopUp use case (must be > 0).
    """

    card_id: int = Field(..., description="Card identifier")
    amount: Optional[Decimal] = Field(default=None, description="Amount to add (must be > 0)")


class TopUpResponseDTO(BaseModel):
    message: str = Field(..., description="Human readable confirmation")
    balance: Decimal = Field(..., description="Balance after the top-up")

    class Config:
        json_schema_extra = {
            "example": {"message": "Card 1 topped up with 50", "balance": "150.000000"}
        }


class SpendCommandDTO(BaseModel):
    """
    Command DTO for spending from a card

    amount and fuel_price are validated by the Spend use case (both must be > 0).
    """

    card_id: int = Field(..., description="Card identifier")
    amount: Optional[Decimal] = Field(default=None, description="Amount to spend (must be > 0)")
    fuel_price: Optional[Decimal] = Field(default=None, description="Fuel price per liter (must be > 0)")


class SpendResponseDTO(BaseModel):
    message: str = Field(..., description="Human readable confirmation")
    remaining_balance: Decimal = Field(..., description="Balance after the spend")
    liters: Decimal = Field(..., description="Liters bought (amount / fuel_price)")

    class Config:
        json_schema_extra = {
            "example": {
                "message": "Card 1 spent 30",
                "remaining_balance": "120.000000",
                "liters": "20.000000"
            }
        }


class TransactionDTO(BaseModel):
    """Single transaction in a card history"""

    transaction_id: int = Field(..., description="Transaction ID")
    transaction_type: str = Field(..., description="topup or spend")
    amount: Decimal = Field(..., description="Transaction amount")
    new_balance: Decimal = Field(..., description="Balance after this transaction")
    fuel_price: Optional[Decimal] = Field(default=None, description="Fuel price (spend only)")
    liters: Optional[Decimal] = Field(default=None, description="Liters (spend only)")
    transaction_date: datetime = Field(..., description="Transaction timestamp")


class ListTransactionsResponseDTO(BaseModel):
    """
    Response DTO for card transaction history

    Transactions are ordered newest first.
    """

    card_id: int = Field(..., description="Card identifier")
    transactions: List[TransactionDTO] = Field(..., description="Transactions, newest first")


class LatestFuelPriceResponseDTO(BaseModel):
    latest_fuel_price: Decimal = Field(..., description="Fuel price of the most recent spend")


class AddCardCommandDTO(BaseModel):
    """
    Command DTO for creating a card

    name must be non-empty and balance a finite, non-negative decimal.
    """

    name: Optional[str] = Field(default=None, description="Card display name")
    balance: Optional[Decimal] = Field(default=None, description="Initial balance")


class AddCardResponseDTO(BaseModel):
    id: int = Field(..., description="Generated card identifier")
    name: str = Field(..., description="Card display name")
    balance: Decimal = Field(..., description="Initial balance")

    class Config:
        json_schema_extra = {
            "example": {"id": 1, "name": "Alice", "balance": "100.000000"}
        }


class DeleteCardResponseDTO(BaseModel):
    message: str = Field(..., description="Human readable confirmation")


class SummaryQueryDTO(BaseModel):
    """
    Query DTO for the spend summary

    Date-only bounds mean midnight of that day.
    """

    card_id: int = Field(..., description="Card identifier")
    start: Optional[datetime] = Field(default=None, description="Inclusive lower bound")
    end: Optional[datetime] = Field(default=None, description="Inclusive upper bound")


class SummaryResponseDTO(BaseModel):
    """
    Response DTO for the spend summary

    card_info is None when the card no longer exists.
    """

    total_spent: Decimal = Field(..., alias="totalSpent", description="Sum of spend amounts")
    total_liters: Decimal = Field(..., alias="totalLiters", description="Sum of liters")
    card_info: Optional[CardDTO] = Field(default=None, alias="cardInfo", description="Current card")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "totalSpent": "30.000000",
                "totalLiters": "20.000000",
                "cardInfo": {"card_id": 1, "card_name": "Alice", "balance": "120.000000"}
            }
        }


class CardDiscrepancyDTO(BaseModel):
    """A balance snapshot that does not match the replayed ledger"""

    card_id: int = Field(..., description="Card identifier")
    transaction_id: Optional[int] = Field(
        default=None,
        description="Offending transaction (None when the card balance itself is off)"
    )
    expected_balance: Decimal = Field(..., description="Balance derived by replaying transactions")
    recorded_balance: Decimal = Field(..., description="Balance stored on the row")
    discrepancy: Decimal = Field(..., description="recorded_balance - expected_balance")


class ReconciliationResultDTO(BaseModel):
    total_cards_checked: int = Field(..., description="Number of cards replayed")
    discrepancies_found: int = Field(..., description="Number of discrepancies")
    discrepancies: List[CardDiscrepancyDTO] = Field(default_factory=list)
    reconciliation_time: datetime = Field(..., description="When reconciliation started")
    execution_time_ms: int = Field(..., description="Duration in milliseconds")
