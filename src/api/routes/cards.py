"""Card API Routes

FastAPI routes for fuel card balances, top-ups, spends and history.

Monetary values and liters are returned as JSON strings (e.g. "120.000000")
so clients see the stored fixed-point value unchanged. Request bodies accept
either JSON numbers or strings, with at most 6 decimal places.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError, status_for
from src.api.schemas.card_request import (
    AddCardRequestSchema,
    SpendRequestSchema,
    TopUpRequestSchema,
)
from src.app.use_cases.cards import (
    AddCard,
    CardSummary,
    DeleteCard,
    GetCardInfo,
    LatestFuelPrice,
    ListCards,
    ListTransactions,
    Spend,
    TopUp,
)
from src.app.use_cases.cards.dtos import (
    AddCardCommandDTO,
    AddCardResponseDTO,
    CardDTO,
    CardInfoResponseDTO,
    DeleteCardResponseDTO,
    LatestFuelPriceResponseDTO,
    ListTransactionsResponseDTO,
    SpendCommandDTO,
    SpendResponseDTO,
    SummaryQueryDTO,
    SummaryResponseDTO,
    TopUpCommandDTO,
    TopUpResponseDTO,
)
from src.adapter.repositories.card_repository import SqlAlchemyCardRepository
from src.adapter.repositories.transaction_repository import SqlAlchemyTransactionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(tags=["Cards"])

NOT_FOUND = {404: {"description": "Card not found", "content": {"application/json": {"example": {"error": "Card not found"}}}}}
BAD_REQUEST = {400: {"description": "Invalid request", "content": {"application/json": {"example": {"error": "Valid amount is required"}}}}}


def _raise_for(result) -> None:
    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))


@router.get("/", response_model=List[CardDTO], status_code=status.HTTP_200_OK)
async def list_cards(session: AsyncSession = Depends(get_session)):
    """
    List every card with its current balance.
    """
    use_case = ListCards(SqlAlchemyCardRepository(session))
    result = await use_case.execute()
    _raise_for(result)
    return result.value


@router.get(
    "/cards/{card_id}/info",
    response_model=CardInfoResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND,
)
async def get_card_info(card_id: int, session: AsyncSession = Depends(get_session)):
    """
    Get current balance and name of a card.

    **Returns:**
    - 200: Card info
    - 404: Card not found
    """
    use_case = GetCardInfo(SqlAlchemyCardRepository(session))
    result = await use_case.execute(card_id)
    _raise_for(result)
    return result.value


@router.post(
    "/cards/{card_id}/topup",
    response_model=TopUpResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
async def top_up_card(
    card_id: int,
    request: TopUpRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Add funds to a card.

    **Request body:**
    - `amount` (required): Amount to add (must be > 0)

    **Returns:**
    - 200: `{message, balance}` with the balance after the top-up
    - 400: Missing or non-positive amount
    - 404: Card not found
    """
    use_case = TopUp(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCardRepository(session),
        SqlAlchemyTransactionRepository(session),
    )
    result = await use_case.execute(TopUpCommandDTO(card_id=card_id, amount=request.amount))
    _raise_for(result)
    return result.value


@router.post(
    "/cards/{card_id}/spend",
    response_model=SpendResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
async def spend_from_card(
    card_id: int,
    request: SpendRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Pay for fuel from a card.

    **Request body:**
    - `amount` (required): Amount to spend (must be > 0)
    - `fuel_price` (required): Price per liter (must be > 0)

    **Returns:**
    - 200: `{message, remaining_balance, liters}`
    - 400: Invalid amount, invalid fuel price or insufficient balance
    - 404: Card not found
    """
    use_case = Spend(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCardRepository(session),
        SqlAlchemyTransactionRepository(session),
    )
    command = SpendCommandDTO(
        card_id=card_id,
        amount=request.amount,
        fuel_price=request.fuel_price,
    )
    result = await use_case.execute(command)
    _raise_for(result)
    return result.value


@router.get(
    "/cards/{card_id}/transactions",
    response_model=ListTransactionsResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND,
)
async def list_card_transactions(card_id: int, session: AsyncSession = Depends(get_session)):
    """
    Transaction history of a card, most recent first.
    """
    use_case = ListTransactions(
        SqlAlchemyCardRepository(session),
        SqlAlchemyTransactionRepository(session),
    )
    result = await use_case.execute(card_id)
    _raise_for(result)
    return result.value


@router.get(
    "/cards/{card_id}/latest-fuel-price",
    response_model=LatestFuelPriceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "No fuel price found"}},
)
async def get_latest_fuel_price(card_id: int, session: AsyncSession = Depends(get_session)):
    """
    Fuel price of the card's most recent spend.
    """
    use_case = LatestFuelPrice(SqlAlchemyTransactionRepository(session))
    result = await use_case.execute(card_id)
    _raise_for(result)
    return result.value


@router.post(
    "/cards/add",
    response_model=AddCardResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid name or balance"}},
)
async def add_card(request: AddCardRequestSchema, session: AsyncSession = Depends(get_session)):
    """
    Create a card.

    **Request body:**
    - `name` (required): Non-empty display name
    - `balance` (required): Initial balance (>= 0), stored exactly as given

    **Returns:**
    - 201: `{id, name, balance}`
    - 400: Invalid name or balance
    """
    use_case = AddCard(SqlAlchemyUnitOfWork(session), SqlAlchemyCardRepository(session))
    result = await use_case.execute(AddCardCommandDTO(name=request.name, balance=request.balance))
    _raise_for(result)
    return result.value


@router.delete(
    "/cards/{card_id}/delete",
    response_model=DeleteCardResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND,
)
async def delete_card(card_id: int, session: AsyncSession = Depends(get_session)):
    """
    Delete a card and its transaction history.
    """
    use_case = DeleteCard(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyCardRepository(session),
        SqlAlchemyTransactionRepository(session),
    )
    result = await use_case.execute(card_id)
    _raise_for(result)
    return result.value


@router.get(
    "/cards/{card_id}/summary",
    response_model=SummaryResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={400: {"description": "Invalid card ID or date range"}},
)
async def get_card_summary(
    card_id: int,
    start: Optional[datetime] = Query(default=None, description="Inclusive lower bound"),
    end: Optional[datetime] = Query(default=None, description="Inclusive upper bound"),
    session: AsyncSession = Depends(get_session),
):
    """
    Total spent and total liters over the card's spends, optionally date bounded.

    **Query parameters:**
    - `start` (optional): ISO date or datetime, inclusive
    - `end` (optional): ISO date or datetime, inclusive

    `cardInfo` is null when the card does not exist.
    """
    use_case = CardSummary(
        SqlAlchemyCardRepository(session),
        SqlAlchemyTransactionRepository(session),
    )
    result = await use_case.execute(SummaryQueryDTO(card_id=card_id, start=start, end=end))
    _raise_for(result)
    return result.value
