"""DeleteCard Use Case

Removes a card together with its transaction history.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.card_repository import CardRepository
from src.app.repositories.transaction_repository import TransactionRepository
from .dtos import DeleteCardResponseDTO

logger = logging.getLogger(__name__)


class DeleteCard:
    """
    Use Case: Delete a card

    Business Rules:
    1. The card's transactions are deleted in the same unit of work,
       so no orphaned history remains
    2. Zero removed rows means the card does not exist
    """

    def __init__(
        self,
        uow: UnitOfWork,
        card_repo: CardRepository,
        transaction_repo: TransactionRepository,
    ):
        self.uow = uow
        self.card_repo = card_repo
        self.transaction_repo = transaction_repo

    async def execute(self, card_id: int) -> Result[DeleteCardResponseDTO]:
        try:
            removed_transactions = await self.transaction_repo.delete_by_card_id(card_id)
            removed_cards = await self.card_repo.delete(card_id)

            if removed_cards == 0:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="CARD_NOT_FOUND",
                        message="Card not found",
                        reason=f"card_id={card_id}",
                    )
                )

            await self.uow.commit()

            logger.info(
                f"Card {card_id} deleted with {removed_transactions} transactions"
            )

            return Return.ok(DeleteCardResponseDTO(message="Card deleted successfully"))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Delete failed for card {card_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_CARD_FAILED",
                    message="Database error",
                    reason=str(e),
                )
            )
