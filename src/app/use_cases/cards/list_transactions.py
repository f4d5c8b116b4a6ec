"""
List Transactions Use Case

Retrieves the full transaction history of a card.
"""
from libs.result import Result, Return, Error
from src.app.repositories.card_repository import CardRepository
from src.app.repositories.transaction_repository import TransactionRepository
from .dtos import ListTransactionsResponseDTO, TransactionDTO


class ListTransactions:
    """
    Use case: View card transactions

    Transactions are ordered by transaction_date DESC (most recent first).
    A card without activity yields an empty list, a missing card an error.
    """

    def __init__(self, card_repo: CardRepository, transaction_repo: TransactionRepository):
        self.card_repo = card_repo
        self.transaction_repo = transaction_repo

    async def execute(self, card_id: int) -> Result[ListTransactionsResponseDTO]:
        """
        List transactions for a card.

        Args:
            card_id: Card identifier

        Returns:
            Result[ListTransactionsResponseDTO]: Transaction list or CARD_NOT_FOUND
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

        transactions = await self.transaction_repo.get_by_card_id(card_id, newest_first=True)

        transaction_dtos = [
            TransactionDTO(
                transaction_id=txn.transaction_id,
                transaction_type=txn.transaction_type.value if hasattr(txn.transaction_type, "value") else txn.transaction_type,
                amount=txn.amount,
                new_balance=txn.new_balance,
                fuel_price=txn.fuel_price,
                liters=txn.liters,
                transaction_date=txn.transaction_date,
            )
            for txn in transactions
        ]

        return Return.ok(
            ListTransactionsResponseDTO(card_id=card_id, transactions=transaction_dtos)
        )
