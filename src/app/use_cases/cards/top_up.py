"""TopUp Use Case

Adds funds to a card and records a topup transaction.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.card_repository import CardRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.transaction import Transaction, TransactionType
from .amounts import fits_column
from .dtos import TopUpCommandDTO, TopUpResponseDTO

logger = logging.getLogger(__name__)


class TopUp:
    """
    Use Case: Top up a card balance

    Business Rules:
    1. Amount must be > 0 with at most 6 decimal places and 12 integer
       digits (rejected before any write)
    2. Additive update: balance = balance + amount in a single statement
    3. The transaction snapshot is the balance returned by that statement
    4. Balance update and transaction insert commit together

    Flow:
    1. Validate amount
    2. Increment balance (UPDATE ... RETURNING)
    3. Create transaction record with the resulting balance
    4. Commit
    5. Return response
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

    async def execute(self, command: TopUpCommandDTO) -> Result[TopUpResponseDTO]:
        """
        Execute card top-up

        Args:
            command: TopUpCommandDTO with card_id and amount

        Returns:
            Result[TopUpResponseDTO]: Success with new balance or error
        """
        # Step 1: Validate amount
        if not fits_column(command.amount) or command.amount <= 0:
            return Return.err(
                Error(
                    code="INVALID_AMOUNT",
                    message="Valid amount is required",
                    reason=f"amount={command.amount}",
                )
            )

        try:
            # Step 2: Atomic additive update
            new_balance = await self.card_repo.increment_balance(command.card_id, command.amount)

            if new_balance is None:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="CARD_NOT_FOUND",
                        message="Card not found",
                        reason=f"card_id={command.card_id}",
                    )
                )

            # Step 3: Append transaction with balance snapshot
            transaction = Transaction(
                card_id=command.card_id,
                transaction_type=TransactionType.TOPUP,
                amount=command.amount,
                new_balance=new_balance,
            )
            await self.transaction_repo.create(transaction)

            # Step 4: Commit both writes
            await self.uow.commit()

            logger.info(
                f"Card {command.card_id} topped up with {command.amount}, "
                f"new balance {new_balance}"
            )

            return Return.ok(
                TopUpResponseDTO(
                    message=f"Card {command.card_id} topped up with {command.amount}",
                    balance=new_balance,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Top-up failed for card {command.card_id}: {e}")
            return Return.err(
                Error(
                    code="TOP_UP_FAILED",
                    message="Database error",
                    reason=str(e),
                )
            )
