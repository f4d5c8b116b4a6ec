"""Get Card Info Use Case

Retrieves a card's current balance and name.
"""

from libs.result import Result, Return, Error
from src.app.repositories.card_repository import CardRepository
from .dtos import CardInfoResponseDTO


class GetCardInfo:
    """
    Get Card Info Use Case

    Read-only operation that retrieves the current balance and name
    for a given card.
    """

    def __init__(self, card_repo: CardRepository):
        """
        Initialize GetCardInfo use case

        Args:
            card_repo: Repository for accessing cards
        """
        self.card_repo = card_repo

    async def execute(self, card_id: int) -> Result[CardInfoResponseDTO]:
        """
        Execute get card info operation

        Args:
            card_id: The card identifier

        Returns:
            Result[CardInfoResponseDTO]: Success with balance data or error

        Errors:
            CARD_NOT_FOUND: No card with this ID
        """
        card = await self.card_repo.get_by_id(card_id)

        if not card:
            return Return.err(
                Error(
                    code="CARD_NOT_FOUND",
                    message="Card not found",
                    reason=f"card_id={card_id}",
                )
            )

        return Return.ok(
            CardInfoResponseDTO(
                card_id=card.card_id,
                balance=card.balance,
                card_name=card.card_name,
            )
        )
