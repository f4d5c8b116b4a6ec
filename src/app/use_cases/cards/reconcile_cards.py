"""ReconcileCards Use Case

Replays every card's transaction history to verify its balance snapshots.
"""

import logging
import time
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.card_repository import CardRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.card import Card
from src.domain.transaction import Transaction, TransactionType
from .dtos import CardDiscrepancyDTO, ReconciliationResultDTO

logger = logging.getLogger(__name__)


def signed_amount(transaction: Transaction) -> Decimal:
    """Balance delta of a transaction: +amount for topup, -amount for spend"""
    if transaction.transaction_type == TransactionType.SPEND:
        return -transaction.amount
    return transaction.amount


class ReconcileCards:
    """
    Use Case: Reconcile card balances against transaction history

    Business Rules:
    1. Transactions are replayed oldest first
    2. Each new_balance must equal the previous new_balance plus the delta
       (the first transaction anchors the replay, since the initial card
       balance is not a transaction)
    3. The card balance must equal the last new_balance
    4. Does NOT modify any data (read-only reconciliation)
    """

    def __init__(self, card_repo: CardRepository, transaction_repo: TransactionRepository):
        self.card_repo = card_repo
        self.transaction_repo = transaction_repo

    async def execute(self) -> Result[ReconciliationResultDTO]:
        """
        Execute card reconciliation

        Returns:
            Result[ReconciliationResultDTO]: Reconciliation result with any discrepancies
        """
        start_time = time.time()
        reconciliation_time = datetime.utcnow()

        try:
            logger.info("Starting card ledger reconciliation")

            cards = await self.card_repo.get_all()
            total_cards = len(cards)

            logger.info(f"Found {total_cards} cards to reconcile")

            discrepancies: List[CardDiscrepancyDTO] = []

            for card in cards:
                transactions = await self.transaction_repo.get_by_card_id(
                    card.card_id, newest_first=False
                )
                discrepancies.extend(self._check_card(card, transactions))

            execution_time_ms = int((time.time() - start_time) * 1000)

            if discrepancies:
                logger.warning(
                    f"Reconciliation complete. Found {len(discrepancies)} discrepancies "
                    f"across {total_cards} cards in {execution_time_ms}ms"
                )
            else:
                logger.info(
                    f"Reconciliation complete. All {total_cards} cards balanced "
                    f"in {execution_time_ms}ms"
                )

            return Return.ok(
                ReconciliationResultDTO(
                    total_cards_checked=total_cards,
                    discrepancies_found=len(discrepancies),
                    discrepancies=discrepancies,
                    reconciliation_time=reconciliation_time,
                    execution_time_ms=execution_time_ms,
                )
            )

        except Exception as e:
            logger.error(f"Card reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile card ledger",
                    reason=str(e),
                )
            )

    def _check_card(
        self, card: Card, transactions: List[Transaction]
    ) -> List[CardDiscrepancyDTO]:
        found: List[CardDiscrepancyDTO] = []
        previous: Optional[Decimal] = None

        for txn in transactions:
            if previous is not None:
                expected = previous + signed_amount(txn)
                if txn.new_balance != expected:
                    found.append(
                        self._discrepancy(card.card_id, txn.transaction_id, expected, txn.new_balance)
                    )
            previous = txn.new_balance

        if previous is not None and card.balance != previous:
            found.append(self._discrepancy(card.card_id, None, previous, card.balance))

        return found

    def _discrepancy(
        self,
        card_id: int,
        transaction_id: Optional[int],
        expected: Decimal,
        recorded: Decimal,
    ) -> CardDiscrepancyDTO:
        logger.warning(
            f"Discrepancy found for card {card_id} "
            f"(transaction_id={transaction_id}): "
            f"expected={expected}, recorded={recorded}, "
            f"discrepancy={recorded - expected}"
        )
        return CardDiscrepancyDTO(
            card_id=card_id,
            transaction_id=transaction_id,
            expected_balance=expected,
            recorded_balance=recorded,
            discrepancy=recorded - expected,
        )
