from .card_repository import CardRepository
from .transaction_repository import TransactionRepository

__all__ = [
    "CardRepository",
    "TransactionRepository",
]
