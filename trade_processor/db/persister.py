"""Write a parsed batch of trades to a storage backend."""

from __future__ import annotations

from typing import Sequence

from trade_processor.db.base_backend import PersistenceResult, TradeStore
from trade_processor.ingestion.diagnostics import DiagnosticSink, LoggingSink
from trade_processor.ingestion.models import TradeRecord


class TradePersister:
    """Persist every trade of a batch atomically and report how many were sent."""

    def __init__(self, store: TradeStore, sink: DiagnosticSink | None = None) -> None:
        self.store = store
        self.sink: DiagnosticSink = sink or LoggingSink()

    def persist(self, records: Sequence[TradeRecord]) -> PersistenceResult:
        self.store.ensure_schema()
        result = self.store.insert_trades(records)
        self.sink.info("%s trades processed", len(records))
        return result


__all__ = ["TradePersister"]
