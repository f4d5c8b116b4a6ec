from .base import BaseModel
from .card import Card
from .transaction import Transaction, TransactionType

__all__ = [
    "BaseModel",
    "Card",
    "Transaction",
    "TransactionType",
]
