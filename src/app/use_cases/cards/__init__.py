"""Fuel card ledger use cases"""
from .list_cards import ListCards
from .get_card_info import GetCardInfo
from .top_up import TopUp
from .spend import Spend
from .list_transactions import ListTransactions
from .latest_fuel_price import LatestFuelPrice
from .add_card import AddCard
from .delete_card import DeleteCard
from .card_summary import CardSummary
from .reconcile_cards import ReconcileCards
from .dtos import (
    CardDTO,
    CardInfoResponseDTO,
    TopUpCommandDTO,
    TopUpResponseDTO,
    SpendCommandDTO,
    SpendResponseDTO,
    TransactionDTO,
    ListTransactionsResponseDTO,
    LatestFuelPriceResponseDTO,
    AddCardCommandDTO,
    AddCardResponseDTO,
    DeleteCardResponseDTO,
    SummaryQueryDTO,
    SummaryResponseDTO,
    CardDiscrepancyDTO,
    ReconciliationResultDTO,
)

__all__ = [
    "ListCards",
    "GetCardInfo",
    "TopUp",
    "Spend",
    "ListTransactions",
    "LatestFuelPrice",
    "AddCard",
    "DeleteCard",
    "CardSummary",
    "ReconcileCards",
    "CardDTO",
    "CardInfoResponseDTO",
    "TopUpCommandDTO",
    "TopUpResponseDTO",
    "SpendCommandDTO",
    "SpendResponseDTO",
    "TransactionDTO",
    "ListTransactionsResponseDTO",
    "LatestFuelPriceResponseDTO",
    "AddCardCommandDTO",
    "AddCardResponseDTO",
    "DeleteCardResponseDTO",
    "SummaryQueryDTO",
    "SummaryResponseDTO",
    "CardDiscrepancyDTO",
    "ReconciliationResultDTO",
]
