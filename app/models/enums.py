"""Enum definitions for property money records."""

from enum import Enum


class MoneyType(str, Enum):
    """What a monetary amount attached to a property represents."""

    RENT = "RENT"
    DEPOSIT = "DEPOSIT"
    FEE = "FEE"
    TAX = "TAX"
    OTHER = "OTHER"
