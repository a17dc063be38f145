"""Monthly Bill Reset Background Worker

Reactivates every bill at the start of each billing cycle.
Can be run as a standalone script or integrated with a scheduler.
"""

import asyncio
import logging
from calendar import monthrange
from datetime import date
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.bill_repository import SqlAlchemyBillRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.finance import ResetMonthlyBills, ResetBillsResponseDTO

logger = logging.getLogger(__name__)


class BillResetWorker:
    """
    Background worker for the monthly bill reset

    Features:
    - Runs on the configured day of month (clamped to the month's last day)
    - Resets at most once per calendar month while running continuously
    - Can run once or continuously

    Usage:
        # Reset now
        worker = BillResetWorker()
        result = await worker.run_once()

        # Check periodically, reset on the reset day
        worker = BillResetWorker()
        await worker.run_forever()
    """

    def __init__(
        self,
        db_uri: Optional[str] = None,
        reset_day: Optional[int] = None,
    ):
        """
        Initialize the worker

        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
            reset_day: Day of month to reset on (defaults to ApplicationConfig.BILL_RESET_DAY)
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.reset_day = reset_day or ApplicationConfig.BILL_RESET_DAY
        self.last_reset_month: Optional[tuple[int, int]] = None

        # Create engine and session factory
        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info(f"BillResetWorker initialized (reset day {self.reset_day})")

    def is_reset_day(self, today: date) -> bool:
        """
        True on the reset day of a month not yet reset

        A reset day past the end of a short month falls on its last day.
        """
        _, last_day = monthrange(today.year, today.month)
        if today.day != min(self.reset_day, last_day):
            return False
        return self.last_reset_month != (today.year, today.month)

    async def run_once(self) -> ResetBillsResponseDTO:
        """
        Reset all bills now

        Returns:
            ResetBillsResponseDTO with the number of bills reactivated
        """
        async with self.async_session_factory() as session:
            uow = SqlAlchemyUnitOfWork(session)
            bill_repo = SqlAlchemyBillRepository(session)

            result = await ResetMonthlyBills(uow, bill_repo).execute()

            if result.is_err():
                logger.error(f"Bill reset failed: {result.error.message}")
                raise RuntimeError(f"Bill reset failed: {result.error.message}")

            today = date.today()
            self.last_reset_month = (today.year, today.month)
            return result.value

    async def run_forever(self, interval_seconds: Optional[int] = None):
        """
        Check for the reset day at a fixed interval

        Args:
            interval_seconds: Seconds between checks (default from config)
        """
        interval = interval_seconds or ApplicationConfig.BILL_RESET_CHECK_INTERVAL_SECONDS
        logger.info(f"Starting bill reset loop, checking every {interval}s")

        while True:
            try:
                if not ApplicationConfig.BILL_RESET_ENABLED:
                    logger.debug("Bill reset is disabled, skipping")
                elif self.is_reset_day(date.today()):
                    result = await self.run_once()
                    logger.info(f"Bill reset cycle complete: {result.bills_reactivated} bills active")
            except Exception as e:
                logger.error(f"Bill reset cycle failed: {e}")

            await asyncio.sleep(interval)

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("BillResetWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        # Reset now and exit
        python -m src.worker.bill_reset --once

        # Run continuously
        python -m src.worker.bill_reset

        # Run continuously with a custom check interval (in seconds)
        python -m src.worker.bill_reset --interval 600
    """
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Monthly Bill Reset Worker")
    parser.add_argument(
        "--once", action="store_true", help="Reset immediately and exit"
    )
    parser.add_argument(
        "--interval", type=int, default=None,
        help="Seconds between reset-day checks (default: BILL_RESET_CHECK_INTERVAL_SECONDS)"
    )
    args = parser.parse_args()

    worker = BillResetWorker()

    try:
        if args.once:
            result = await worker.run_once()
            print(f"Bill reset complete: {result.bills_reactivated} bills reactivated")
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
