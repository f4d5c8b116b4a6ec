"""Spend Use Case

Deducts a fuel purchase from a card and records a spend transaction.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.card_repository import CardRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.transaction import Transaction, TransactionType
from .amounts import DECIMAL_QUANTUM, MAX_MAGNITUDE, fits_column
from .dtos import SpendCommandDTO, SpendResponseDTO

logger = logging.getLogger(__name__)


class Spend:
    """
    Use Case: Spend from a card balance

    Business Rules:
    1. Amount and fuel price must be > 0 with at most 6 decimal places and
       12 integer digits (rejected before any write), and so must liters
    2. Sufficient balance: balance >= amount required
    3. Conditional decrement: the UPDATE only matches while balance >= amount,
       so two concurrent spends cannot both pass on a stale read
    4. liters = amount / fuel_price, quantized to 6 decimal places
    5. Balance update and transaction insert commit together

    Flow:
    1. Validate amount and fuel price
    2. Get card with lock (SELECT FOR UPDATE)
    3. Validate sufficient balance
    4. Conditionally decrement balance (UPDATE ... WHERE balance >= amount RETURNING)
    5. Create transaction record
    6. Commit
    7. Return response
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

    async def execute(self, command: SpendCommandDTO) -> Result[SpendResponseDTO]:
        """
        Execute card spend

        Args:
            command: SpendCommandDTO with card_id, amount, fuel_price

        Returns:
            Result[SpendResponseDTO]: Success with remaining balance and liters or error
        """
        # Step 1: Validate input
        if not fits_column(command.amount) or command.amount <= 0:
            return Return.err(
                Error(
                    code="INVALID_AMOUNT",
                    message="Valid amount is required",
                    reason=f"amount={command.amount}",
                )
            )

        if not fits_column(command.fuel_price) or command.fuel_price <= 0:
            return self._invalid_fuel_price(command)

        liters = (command.amount / command.fuel_price).quantize(DECIMAL_QUANTUM)
        if liters >= MAX_MAGNITUDE:
            return self._invalid_fuel_price(command)

        try:
            # Step 2: Get card with pessimistic lock
            card = await self.card_repo.get_by_id(command.card_id, for_update=True)

            if not card:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="CARD_NOT_FOUND",
                        message="Card not found",
                        reason=f"card_id={command.card_id}",
                    )
                )

            # Step 3: Validate sufficient balance
            if card.balance < command.amount:
                await self.uow.rollback()
                return self._insufficient(command, card.balance)

            # Step 4: Conditional decrement
            remaining_balance = await self.card_repo.decrement_balance_if_sufficient(
                command.card_id, command.amount
            )

            if remaining_balance is None:
                # Balance changed between the read and the update
                await self.uow.rollback()
                return self._insufficient(command, card.balance)

            # Step 5: Append transaction with balance snapshot
            transaction = Transaction(
                card_id=command.card_id,
                transaction_type=TransactionType.SPEND,
                amount=command.amount,
                new_balance=remaining_balance,
                fuel_price=command.fuel_price,
                liters=liters,
            )
            await self.transaction_repo.create(transaction)

            # Step 6: Commit both writes
            await self.uow.commit()

            logger.info(
                f"Card {command.card_id} spent {command.amount} "
                f"({liters} L at {command.fuel_price}), remaining {remaining_balance}"
            )

            return Return.ok(
                SpendResponseDTO(
                    message=f"Card {command.card_id} spent {command.amount}",
                    remaining_balance=remaining_balance,
                    liters=liters,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Spend failed for card {command.card_id}: {e}")
            return Return.err(
                Error(
                    code="SPEND_FAILED",
                    message="Database error",
                    reason=str(e),
                )
            )

    def _insufficient(self, command: SpendCommandDTO, balance: Decimal) -> Result:
        return Return.err(
            Error(
                code="INSUFFICIENT_BALANCE",
                message="Insufficient balance",
                reason=f"balance={balance}, required={command.amount}",
            )
        )

    def _invalid_fuel_price(self, command: SpendCommandDTO) -> Result:
        return Return.err(
            Error(
                code="INVALID_FUEL_PRICE",
                message="Valid fuel price is required",
                reason=f"fuel_price={command.fuel_price}, amount={command.amount}",
            )
        )
