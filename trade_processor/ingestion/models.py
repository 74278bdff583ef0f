"""Data models shared across ingestion and persistence modules."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

LOT_SIZE = 100000


@dataclass(slots=True)
class TradeRecord:
    """Representation of a single trade mapped from a validated input line."""

    source_currency: str
    destination_currency: str
    lots: int
    price: Decimal
