"""List Cards Use Case

Retrieves every card with its current balance.
"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.card_repository import CardRepository
from .dtos import CardDTO


class ListCards:
    """
    Use Case: List all cards

    Read-only. Order is whatever storage returns.
    """

    def __init__(self, card_repo: CardRepository):
        self.card_repo = card_repo

    async def execute(self) -> Result[List[CardDTO]]:
        cards = await self.card_repo.get_all()

        return Return.ok(
            [
                CardDTO(card_id=card.card_id, card_name=card.card_name, balance=card.balance)
                for card in cards
            ]
        )
