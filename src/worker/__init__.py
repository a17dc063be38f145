"""Background workers for the finance service"""
from .bill_reset import BillResetWorker

__all__ = ["BillResetWorker"]
