"""Card Repository Interface

Defines the contract for card persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from decimal import Decimal
from src.domain.card import Card


class CardRepository(ABC):
    """
    Repository interface for Card persistence

    Balance mutations are single atomic UPDATE statements that return the
    resulting balance, so callers never compute a balance from a stale read.
    """

    @abstractmethod
    async def get_all(self) -> List[Card]:
        """Retrieve all cards (storage order)"""
        pass

    @abstractmethod
    async def get_by_id(self, card_id: int, for_update: bool = False) -> Optional[Card]:
        """
        Retrieve card by ID

        Args:
            card_id: Card ID
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Card if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, card: Card) -> Card:
        """
        Create a new card

        Args:
            card: Card entity to persist

        Returns:
            Created Card with generated ID
        """
        pass

    @abstractmethod
    async def increment_balance(self, card_id: int, amount: Decimal) -> Optional[Decimal]:
        """
        Atomically add amount to the card balance

        Args:
            card_id: Card ID
            amount: Positive amount to add

        Returns:
            Resulting balance, or None if no card matched
        """
        pass

    @abstractmethod
    async def decrement_balance_if_sufficient(self, card_id: int, amount: Decimal) -> Optional[Decimal]:
        """
        Atomically subtract amount when the balance covers it

        Args:
            card_id: Card ID
            amount: Positive amount to subtract

        Returns:
            Resulting balance, or None if no card matched or balance < amount
        """
        pass

    @abstractmethod
    async def delete(self, card_id: int) -> int:
        """
        Delete a card

        Returns:
            Number of rows removed (0 or 1)
        """
        pass
