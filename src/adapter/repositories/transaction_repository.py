"""SQLAlchemy implementation of TransactionRepository

Provides append-only persistence and aggregate queries for card transactions.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple
from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.transaction import Transaction, TransactionType


class SqlAlchemyTransactionRepository(TransactionRepository):
    """
    SQLAlchemy implementation of TransactionRepository

    History is ordered by transaction_date, with transaction_id as the
    tie-breaker so rows written within the same clock tick keep insertion order.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, transaction: Transaction) -> Transaction:
        self.session.add(transaction)
        await self.session.flush()
        await self.session.refresh(transaction)
        return transaction

    async def get_by_card_id(self, card_id: int, newest_first: bool = True) -> List[Transaction]:
        stmt = select(Transaction).where(Transaction.card_id == card_id)

        if newest_first:
            stmt = stmt.order_by(
                Transaction.transaction_date.desc(), Transaction.transaction_id.desc()
            )
        else:
            stmt = stmt.order_by(
                Transaction.transaction_date.asc(), Transaction.transaction_id.asc()
            )

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_latest_spend(self, card_id: int) -> Optional[Transaction]:
        stmt = (
            select(Transaction)
            .where(
                Transaction.card_id == card_id,
                Transaction.transaction_type == TransactionType.SPEND.value,
            )
            .order_by(Transaction.transaction_date.desc(), Transaction.transaction_id.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_spend_totals(
        self,
        card_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Tuple[Decimal, Decimal]:
        """
        SELECT SUM(amount), SUM(liters) FROM transactions
        WHERE card_id = :id AND transaction_type = 'spend'
          [AND transaction_date >= :start] [AND transaction_date <= :end]
        """
        conditions = [
            Transaction.card_id == card_id,
            Transaction.transaction_type == TransactionType.SPEND.value,
        ]
        if start is not None:
            conditions.append(Transaction.transaction_date >= start)
        if end is not None:
            conditions.append(Transaction.transaction_date <= end)

        stmt = select(
            func.sum(Transaction.amount),
            func.sum(Transaction.liters),
        ).where(*conditions)

        result = await self.session.execute(stmt)
        total_spent, total_liters = result.one()
        return (
            Decimal(total_spent) if total_spent is not None else Decimal("0"),
            Decimal(total_liters) if total_liters is not None else Decimal("0"),
        )

    async def delete_by_card_id(self, card_id: int) -> int:
        stmt = (
            delete(Transaction)
            .where(Transaction.card_id == card_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
