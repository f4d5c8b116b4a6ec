"""Card Summary Use Case

Aggregates spend amount and liters for a card over an optional date range.
"""

from datetime import datetime, timezone
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.card_repository import CardRepository
from src.app.repositories.transaction_repository import TransactionRepository
from .dtos import CardDTO, SummaryQueryDTO, SummaryResponseDTO


def _to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # transaction_date is stored as naive UTC
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class CardSummary:
    """
    Use Case: Spend summary

    Business Rules:
    1. Only SPEND transactions are aggregated
    2. start and end are inclusive and independently optional
    3. Sums default to 0 when nothing matches
    4. A missing card is not an error: card_info is None
    """

    def __init__(self, card_repo: CardRepository, transaction_repo: TransactionRepository):
        self.card_repo = card_repo
        self.transaction_repo = transaction_repo

    async def execute(self, query: SummaryQueryDTO) -> Result[SummaryResponseDTO]:
        start = _to_naive_utc(query.start)
        end = _to_naive_utc(query.end)

        if start is not None and end is not None and start > end:
            return Return.err(
                Error(
                    code="INVALID_DATE_RANGE",
                    message="start must not be after end",
                    reason=f"start={start}, end={end}",
                )
            )

        total_spent, total_liters = await self.transaction_repo.get_spend_totals(
            query.card_id, start=start, end=end
        )

        card = await self.card_repo.get_by_id(query.card_id)
        card_info = (
            CardDTO(card_id=card.card_id, card_name=card.card_name, balance=card.balance)
            if card
            else None
        )

        return Return.ok(
            SummaryResponseDTO(
                total_spent=total_spent,
                total_liters=total_liters,
                card_info=card_info,
            )
        )
