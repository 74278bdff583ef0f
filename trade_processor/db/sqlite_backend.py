"""SQLite backend strategy implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from trade_processor.db import DEFAULT_SQLITE_DB_PATH
from trade_processor.db.base_backend import PersistenceResult, TradeStore
from trade_processor.db.sqlite_manager import SQLiteManager
from trade_processor.ingestion.models import TradeRecord


class SQLiteBackend(TradeStore):
    """Backend strategy that stores trades in a local SQLite database."""

    def __init__(
        self,
        db_path: str | Path = DEFAULT_SQLITE_DB_PATH,
        *,
        manager: SQLiteManager | None = None,
    ) -> None:
        self.manager = manager or SQLiteManager(db_path)
        self.db_path = Path(self.manager.db_path)

    def ensure_schema(self) -> None:
        # ``SQLiteManager`` creates the schema in its constructor.
        return None

    def insert_trades(self, rows: Sequence[TradeRecord]) -> PersistenceResult:
        return self.manager.insert_trades(rows)

    def fetch_all(self) -> list[TradeRecord]:
        return self.manager.fetch_all()

    def close(self) -> None:  # pragma: no cover - trivial delegator
        self.manager.close()


__all__ = ["SQLiteBackend"]
