"""Unit tests for TopUp use case"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

from src.app.use_cases.cards.top_up import TopUp
from src.app.use_cases.cards.dtos import TopUpCommandDTO
from src.domain.transaction import Transaction, TransactionType


@pytest.fixture
def top_up_use_case(mock_uow, mock_card_repo, mock_transaction_repo):
    """TopUp use case instance with mocked dependencies"""
    return TopUp(
        uow=mock_uow,
        card_repo=mock_card_repo,
        transaction_repo=mock_transaction_repo,
    )


@pytest.mark.asyncio
class TestTopUpSuccess:
    """Test successful top-up"""

    async def test_top_up_increments_and_records_snapshot(
        self, top_up_use_case, mock_card_repo, mock_transaction_repo, mock_uow
    ):
        """
        Given: Card 1 exists with balance 100
        When: topped up with 50
        Then: Balance is 150 and a topup transaction records 150
        """
        # Arrange
        mock_card_repo.increment_balance = AsyncMock(return_value=Decimal("150.000000"))
        mock_transaction_repo.create = AsyncMock(side_effect=lambda txn: txn)

        # Act
        result = await top_up_use_case.execute(TopUpCommandDTO(card_id=1, amount=Decimal("50")))

        # Assert
        assert result.is_ok()
        assert result.value.balance == Decimal("150.000000")
        assert result.value.message == "Card 1 topped up with 50"

        mock_card_repo.increment_balance.assert_called_once_with(1, Decimal("50"))
        created = mock_transaction_repo.create.call_args[0][0]
        assert isinstance(created, Transaction)
        assert created.card_id == 1
        assert created.transaction_type == TransactionType.TOPUP
        assert created.amount == Decimal("50")
        assert created.new_balance == Decimal("150.000000")
        assert created.fuel_price is None
        mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
class TestTopUpValidation:
    """Test amount validation happens before any write"""

    @pytest.mark.parametrize(
        "amount",
        [None, Decimal("0"), Decimal("-5"), Decimal("0.0000001"), Decimal("1000000000000")],
    )
    async def test_rejects_invalid_amount(
        self, top_up_use_case, mock_card_repo, mock_transaction_repo, mock_uow, amount
    ):
        mock_card_repo.increment_balance = AsyncMock()
        mock_transaction_repo.create = AsyncMock()

        result = await top_up_use_case.execute(TopUpCommandDTO(card_id=1, amount=amount))

        assert result.is_err()
        assert result.error.code == "INVALID_AMOUNT"
        assert result.error.message == "Valid amount is required"
        mock_card_repo.increment_balance.assert_not_called()
        mock_transaction_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestTopUpFailures:
    """Test missing card and storage failures"""

    async def test_card_not_found(
        self, top_up_use_case, mock_card_repo, mock_transaction_repo, mock_uow
    ):
        mock_card_repo.increment_balance = AsyncMock(return_value=None)
        mock_transaction_repo.create = AsyncMock()

        result = await top_up_use_case.execute(TopUpCommandDTO(card_id=99, amount=Decimal("10")))

        assert result.is_err()
        assert result.error.code == "CARD_NOT_FOUND"
        mock_transaction_repo.create.assert_not_called()
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()

    async def test_transaction_insert_failure_rolls_back_balance(
        self, top_up_use_case, mock_card_repo, mock_transaction_repo, mock_uow
    ):
        mock_card_repo.increment_balance = AsyncMock(return_value=Decimal("110"))
        mock_transaction_repo.create = AsyncMock(side_effect=Exception("disk full"))

        result = await top_up_use_case.execute(TopUpCommandDTO(card_id=1, amount=Decimal("10")))

        assert result.is_err()
        assert result.error.code == "TOP_UP_FAILED"
        assert result.error.message == "Database error"
        assert result.error.reason == "disk full"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
