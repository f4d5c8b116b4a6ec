"""Unit tests for AddCard use case"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

from src.app.use_cases.cards.add_card import AddCard
from src.app.use_cases.cards.dtos import AddCardCommandDTO


def assign_id(card):
    card.card_id = 1
    return card


@pytest.fixture
def add_card_use_case(mock_uow, mock_card_repo):
    return AddCard(uow=mock_uow, card_repo=mock_card_repo)


@pytest.mark.asyncio
class TestAddCard:
    async def test_creates_card_with_given_balance(self, add_card_use_case, mock_card_repo, mock_uow):
        mock_card_repo.create = AsyncMock(side_effect=assign_id)

        result = await add_card_use_case.execute(
            AddCardCommandDTO(name="Alice", balance=Decimal("100"))
        )

        assert result.is_ok()
        assert result.value.id == 1
        assert result.value.name == "Alice"
        assert result.value.balance == Decimal("100")

        created = mock_card_repo.create.call_args[0][0]
        assert created.card_name == "Alice"
        assert created.balance == Decimal("100")
        mock_uow.commit.assert_called_once()

    async def test_zero_balance_is_allowed(self, add_card_use_case, mock_card_repo):
        mock_card_repo.create = AsyncMock(side_effect=assign_id)

        result = await add_card_use_case.execute(
            AddCardCommandDTO(name="Empty", balance=Decimal("0"))
        )

        assert result.is_ok()
        assert result.value.balance == Decimal("0")

    @pytest.mark.parametrize(
        "name,balance",
        [
            (None, Decimal("10")),
            ("", Decimal("10")),
            ("   ", Decimal("10")),
            ("Alice", None),
            ("Alice", Decimal("-1")),
            ("Alice", Decimal("0.1234567")),
            ("Alice", Decimal("1000000000000")),
            ("x" * 256, Decimal("10")),
        ],
    )
    async def test_rejects_invalid_input(
        self, add_card_use_case, mock_card_repo, mock_uow, name, balance
    ):
        mock_card_repo.create = AsyncMock()

        result = await add_card_use_case.execute(AddCardCommandDTO(name=name, balance=balance))

        assert result.is_err()
        assert result.error.code == "INVALID_CARD"
        assert result.error.message == "Invalid name or balance"
        mock_card_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_storage_failure(self, add_card_use_case, mock_card_repo, mock_uow):
        mock_card_repo.create = AsyncMock(side_effect=Exception("unique violation"))

        result = await add_card_use_case.execute(
            AddCardCommandDTO(name="Alice", balance=Decimal("1"))
        )

        assert result.is_err()
        assert result.error.code == "ADD_CARD_FAILED"
        assert result.error.message == "Database error"
        mock_uow.rollback.assert_called_once()
