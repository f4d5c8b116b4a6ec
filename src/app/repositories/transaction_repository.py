"""Transaction Repository Interface

Defines the contract for card transaction persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple
from src.domain.transaction import Transaction


class TransactionRepository(ABC):
    """
    Repository interface for Transaction persistence

    Transactions are immutable and append-only: there is no update method.
    """

    @abstractmethod
    async def create(self, transaction: Transaction) -> Transaction:
        """
        Append a new transaction

        Args:
            transaction: Transaction entity to persist

        Returns:
            Created Transaction with generated ID and timestamp
        """
        pass

    @abstractmethod
    async def get_by_card_id(self, card_id: int, newest_first: bool = True) -> List[Transaction]:
        """
        Retrieve all transactions of a card

        Args:
            card_id: Card ID
            newest_first: Order by transaction_date DESC if True, ASC otherwise

        Returns:
            List of transactions (empty if none)
        """
        pass

    @abstractmethod
    async def get_latest_spend(self, card_id: int) -> Optional[Transaction]:
        """Retrieve the most recent SPEND transaction of a card"""
        pass

    @abstractmethod
    async def get_spend_totals(
        self,
        card_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Tuple[Decimal, Decimal]:
        """
        Sum amount and liters of SPEND transactions

        Args:
            card_id: Card ID
            start: Inclusive lower bound on transaction_date (optional)
            end: Inclusive upper bound on transaction_date (optional)

        Returns:
            (total_spent, total_liters), zeros when nothing matches
        """
        pass

    @abstractmethod
    async def delete_by_card_id(self, card_id: int) -> int:
        """
        Delete the transaction history of a card

        Returns:
            Number of rows removed
        """
        pass
