"""Latest Fuel Price Use Case

Returns the fuel price recorded on a card's most recent spend.
"""

from libs.result import Result, Return, Error
from src.app.repositories.transaction_repository import TransactionRepository
from .dtos import LatestFuelPriceResponseDTO


class LatestFuelPrice:
    def __init__(self, transaction_repo: TransactionRepository):
        self.transaction_repo = transaction_repo

    async def execute(self, card_id: int) -> Result[LatestFuelPriceResponseDTO]:
        latest = await self.transaction_repo.get_latest_spend(card_id)

        if latest is None or latest.fuel_price is None:
            return Return.err(
                Error(
                    code="FUEL_PRICE_NOT_FOUND",
                    message="No fuel price found",
                    reason=f"card_id={card_id}",
                )
            )

        return Return.ok(LatestFuelPriceResponseDTO(latest_fuel_price=latest.fuel_price))
