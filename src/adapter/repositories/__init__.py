from .card_repository import SqlAlchemyCardRepository
from .transaction_repository import SqlAlchemyTransactionRepository

__all__ = [
    "SqlAlchemyCardRepository",
    "SqlAlchemyTransactionRepository",
]
