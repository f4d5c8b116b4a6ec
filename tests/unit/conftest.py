import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock unit of work with async commit/rollback"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_card_repo():
    """Mock card repository"""
    return MagicMock()


@pytest.fixture
def mock_transaction_repo():
    """Mock transaction repository"""
    return MagicMock()
