"""Unit tests for DeleteCard use case"""

import pytest
from unittest.mock import AsyncMock

from src.app.use_cases.cards.delete_card import DeleteCard


@pytest.fixture
def delete_card_use_case(mock_uow, mock_card_repo, mock_transaction_repo):
    return DeleteCard(
        uow=mock_uow,
        card_repo=mock_card_repo,
        transaction_repo=mock_transaction_repo,
    )


@pytest.mark.asyncio
class TestDeleteCard:
    async def test_deletes_card_and_history(
        self, delete_card_use_case, mock_card_repo, mock_transaction_repo, mock_uow
    ):
        mock_transaction_repo.delete_by_card_id = AsyncMock(return_value=2)
        mock_card_repo.delete = AsyncMock(return_value=1)

        result = await delete_card_use_case.execute(1)

        assert result.is_ok()
        assert result.value.message == "Card deleted successfully"
        mock_transaction_repo.delete_by_card_id.assert_called_once_with(1)
        mock_card_repo.delete.assert_called_once_with(1)
        mock_uow.commit.assert_called_once()

    async def test_missing_card_rolls_back(
        self, delete_card_use_case, mock_card_repo, mock_transaction_repo, mock_uow
    ):
        mock_transaction_repo.delete_by_card_id = AsyncMock(return_value=0)
        mock_card_repo.delete = AsyncMock(return_value=0)

        result = await delete_card_use_case.execute(99)

        assert result.is_err()
        assert result.error.code == "CARD_NOT_FOUND"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()

    async def test_storage_failure(
        self, delete_card_use_case, mock_card_repo, mock_transaction_repo, mock_uow
    ):
        mock_transaction_repo.delete_by_card_id = AsyncMock(return_value=3)
        mock_card_repo.delete = AsyncMock(side_effect=Exception("lock timeout"))

        result = await delete_card_use_case.execute(1)

        assert result.is_err()
        assert result.error.code == "DELETE_CARD_FAILED"
        assert result.error.reason == "lock timeout"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
