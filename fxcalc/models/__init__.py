"""Pydantic domain models for the exchange calculator."""

from .constants import (
    SOURCE_CURRENCY,
    INTERMEDIARY_CURRENCY,
    LOCAL_CURRENCY,
)  # re-export
from .calculator import BankRate, CalculationInput, BankComparison, CalculationResult
from .defaults import DEFAULT_BANKS, default_banks

__all__ = [
    "SOURCE_CURRENCY",
    "INTERMEDIARY_CURRENCY",
    "LOCAL_CURRENCY",
    "BankRate",
    "CalculationInput",
    "BankComparison",
    "CalculationResult",
    "DEFAULT_BANKS",
    "default_banks",
]
