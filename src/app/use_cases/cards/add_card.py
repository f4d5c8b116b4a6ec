"""AddCard Use Case

Creates a card with an explicit initial balance.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.card_repository import CardRepository
from src.domain.card import Card
from .amounts import fits_column
from .dtos import AddCardCommandDTO, AddCardResponseDTO

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255


class AddCard:
    """
    Use Case: Create a card

    Business Rules:
    1. Name must be non-empty and at most 255 characters
    2. Balance must be non-negative with at most 6 decimal places and
       12 integer digits, so it is stored exactly as given
    3. The card starts with exactly the given balance (no default)
    """

    def __init__(self, uow: UnitOfWork, card_repo: CardRepository):
        self.uow = uow
        self.card_repo = card_repo

    async def execute(self, command: AddCardCommandDTO) -> Result[AddCardResponseDTO]:
        """
        Execute card creation

        Args:
            command: AddCardCommandDTO with name and balance

        Returns:
            Result[AddCardResponseDTO]: Created card or INVALID_CARD
        """
        name_valid = (
            command.name is not None
            and command.name.strip() != ""
            and len(command.name) <= MAX_NAME_LENGTH
        )
        balance_valid = fits_column(command.balance) and command.balance >= 0

        if not (name_valid and balance_valid):
            return Return.err(
                Error(
                    code="INVALID_CARD",
                    message="Invalid name or balance",
                    reason=f"name={command.name!r}, balance={command.balance}",
                )
            )

        try:
            card = await self.card_repo.create(
                Card(card_name=command.name, balance=command.balance)
            )
            await self.uow.commit()

            logger.info(f"Card {card.card_id} created with balance {command.balance}")

            return Return.ok(
                AddCardResponseDTO(
                    id=card.card_id,
                    name=command.name,
                    balance=command.balance,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Card creation failed: {e}")
            return Return.err(
                Error(
                    code="ADD_CARD_FAILED",
                    message="Database error",
                    reason=str(e),
                )
            )
