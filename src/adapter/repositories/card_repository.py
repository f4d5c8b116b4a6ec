"""SQLAlchemy implementation of CardRepository

Balance mutations are single UPDATE ... RETURNING statements, so the new
balance comes from the same statement that changed it.
"""

from typing import List, Optional
from decimal import Decimal
from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.card_repository import CardRepository
from src.domain.card import Card


class SqlAlchemyCardRepository(CardRepository):
    """
    SQLAlchemy implementation of CardRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Atomic additive and conditional balance updates
    - Reads always refresh identity-mapped cards from the database
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[Card]:
        stmt = select(Card).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, card_id: int, for_update: bool = False) -> Optional[Card]:
        """
        Retrieve card by ID with optional row-level locking

        Args:
            card_id: Card ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Card if found, None otherwise
        """
        stmt = (
            select(Card)
            .where(Card.card_id == card_id)
            .execution_options(populate_existing=True)
        )

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, card: Card) -> Card:
        self.session.add(card)
        await self.session.flush()
        await self.session.refresh(card)
        return card

    async def increment_balance(self, card_id: int, amount: Decimal) -> Optional[Decimal]:
        """
        UPDATE cards SET balance = balance + :amount WHERE card_id = :id RETURNING balance
        """
        stmt = (
            update(Card)
            .where(Card.card_id == card_id)
            .values(balance=Card.balance + amount)
            .returning(Card.balance)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def decrement_balance_if_sufficient(self, card_id: int, amount: Decimal) -> Optional[Decimal]:
        """
        UPDATE cards SET balance = balance - :amount
        WHERE card_id = :id AND balance >= :amount RETURNING balance

        Zero matched rows means the card is gone or the balance no longer
        covers the amount; the caller tells the two apart.
        """
        stmt = (
            update(Card)
            .where(Card.card_id == card_id, Card.balance >= amount)
            .values(balance=Card.balance - amount)
            .returning(Card.balance)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, card_id: int) -> int:
        stmt = (
            delete(Card)
            .where(Card.card_id == card_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
