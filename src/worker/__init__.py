"""Background workers for the fuel card ledger"""
from .card_reconciler import CardReconcilerWorker

__all__ = ["CardReconcilerWorker"]
