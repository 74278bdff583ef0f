"""Batch persistence against an in-memory store."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

import pytest

from trade_processor.db.base_backend import PersistenceResult, StorageError, TradeStore
from trade_processor.db.persister import TradePersister
from trade_processor.ingestion.diagnostics import RecordingSink
from trade_processor.ingestion.models import TradeRecord


class _MemoryStore(TradeStore):
    def __init__(self, *, fail: bool = False) -> None:
        self.rows: list[TradeRecord] = []
        self.schema_calls = 0
        self.insert_calls = 0
        self.fail = fail

    def ensure_schema(self) -> None:
        self.schema_calls += 1

    def insert_trades(self, rows: Sequence[TradeRecord]) -> PersistenceResult:
        self.insert_calls += 1
        if self.fail:
            raise StorageError("disk full")
        self.rows.extend(rows)
        return PersistenceResult(inserted=len(rows))

    def fetch_all(self) -> list[TradeRecord]:
        return list(self.rows)


def _trades(count: int) -> list[TradeRecord]:
    return [TradeRecord("EUR", "USD", index, Decimal("1.1")) for index in range(count)]


@pytest.mark.parametrize("count", [0, 1, 3])
def test_persist_inserts_every_record_and_reports_count(count: int) -> None:
    store = _MemoryStore()
    sink = RecordingSink()

    result = TradePersister(store, sink).persist(_trades(count))

    assert result.inserted == count
    assert store.rows == _trades(count)
    assert store.schema_calls == 1
    assert store.insert_calls == 1
    assert sink.messages == [("INFO", f"{count} trades processed")]


def test_persist_propagates_storage_failures_without_reporting() -> None:
    store = _MemoryStore(fail=True)
    sink = RecordingSink()

    with pytest.raises(StorageError, match="disk full"):
        TradePersister(store, sink).persist(_trades(2))

    assert sink.messages == []
