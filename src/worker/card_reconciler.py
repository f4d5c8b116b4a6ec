"""Card reconciliation worker

Replays every card's transaction history and reports balance snapshots
that do not add up. Read-only; never repairs data.

    python -m src.worker.card_reconciler --once
    python -m src.worker.card_reconciler --interval 3600
"""

import argparse
import asyncio
import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.card_repository import SqlAlchemyCardRepository
from src.adapter.repositories.transaction_repository import SqlAlchemyTransactionRepository
from src.app.use_cases.cards import ReconcileCards, ReconciliationResultDTO

logger = logging.getLogger(__name__)


def format_report(result: ReconciliationResultDTO) -> str:
    """Plain-text summary of a reconciliation run, one discrepancy per line"""
    lines: List[str] = [
        f"Checked {result.total_cards_checked} cards in {result.execution_time_ms}ms, "
        f"{result.discrepancies_found} discrepancies"
    ]
    for d in result.discrepancies:
        where = f"transaction {d.transaction_id}" if d.transaction_id is not None else "card balance"
        lines.append(
            f"card {d.card_id} ({where}): expected {d.expected_balance}, "
            f"recorded {d.recorded_balance}, off by {d.discrepancy}"
        )
    return "\n".join(lines)


class CardReconcilerWorker:
    """Runs ReconcileCards on its own engine, once or on a fixed interval"""

    def __init__(self, db_uri: Optional[str] = None):
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    async def run_once(self) -> ReconciliationResultDTO:
        """
        Reconcile every card a single time

        Raises:
            RuntimeError: If the reconciliation use case fails
        """
        if not ApplicationConfig.RECONCILIATION_ENABLED:
            logger.info("RECONCILIATION_ENABLED is off, nothing checked")
            return ReconciliationResultDTO(
                total_cards_checked=0,
                discrepancies_found=0,
                discrepancies=[],
                reconciliation_time=datetime.utcnow(),
                execution_time_ms=0,
            )

        async with self.async_session_factory() as session:
            result = await ReconcileCards(
                card_repo=SqlAlchemyCardRepository(session),
                transaction_repo=SqlAlchemyTransactionRepository(session),
            ).execute()

        if result.is_err():
            logger.error(f"{result.error.code}: {result.error.reason}")
            raise RuntimeError(result.error.message)

        if result.value.discrepancies_found:
            logger.error(format_report(result.value))

        return result.value

    async def run_forever(self, interval_seconds: int = 86400):
        logger.info(f"Reconciling cards every {interval_seconds}s")

        while True:
            try:
                report = await self.run_once()
                logger.info(format_report(report).splitlines()[0])
            except Exception as e:
                logger.error(f"Reconciliation cycle failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        await self.engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Replay card histories and report balance discrepancies")
    parser.add_argument("--once", action="store_true", help="Reconcile a single time and exit")
    parser.add_argument(
        "--interval",
        type=int,
        default=ApplicationConfig.RECONCILIATION_INTERVAL_SECONDS,
        help="Seconds between runs when not using --once",
    )
    return parser


async def main(argv: Optional[List[str]] = None):
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)
    worker = CardReconcilerWorker()

    try:
        if args.once:
            print(format_report(await worker.run_once()))
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
