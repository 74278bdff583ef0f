"""Turn validated field tuples into :class:`TradeRecord` objects."""

from __future__ import annotations

from typing import Sequence

from trade_processor.ingestion.models import LOT_SIZE, TradeRecord
from trade_processor.ingestion.validator import parse_trade_amount, parse_trade_price


def map_trade_record(fields: Sequence[str]) -> TradeRecord:
    """Build a trade from fields that already passed :class:`TradeValidator`.

    Fractional lots are dropped, truncating toward zero.
    """

    amount = parse_trade_amount(fields[1])
    price = parse_trade_price(fields[2])
    if amount is None or price is None:
        raise ValueError(f"Fields were not validated before mapping: {list(fields)!r}")

    return TradeRecord(
        source_currency=fields[0][:3],
        destination_currency=fields[0][3:6],
        lots=lots_from_amount(amount),
        price=price,
    )


def lots_from_amount(amount: int) -> int:
    lots = abs(amount) // LOT_SIZE
    return -lots if amount < 0 else lots


__all__ = ["lots_from_amount", "map_trade_record"]
