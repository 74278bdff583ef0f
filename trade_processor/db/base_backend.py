"""Backend strategy interfaces for trade storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from trade_processor.ingestion.models import TradeRecord


class StorageError(RuntimeError):
    """Raised when a batch could not be written; nothing from the batch is kept."""


@dataclass(slots=True)
class PersistenceResult:
    """Represents how many trades were written in a batch."""

    inserted: int = 0


class TradeStore(ABC):
    """Common interface implemented by every storage backend."""

    @abstractmethod
    def ensure_schema(self) -> None:
        """Create required tables/collections and verify connectivity."""

    @abstractmethod
    def insert_trades(self, rows: Sequence[TradeRecord]) -> PersistenceResult:
        """Insert every trade in ``rows`` as one all-or-nothing unit."""

    @abstractmethod
    def fetch_all(self) -> list[TradeRecord]:
        """Return stored trades in insertion order."""

    def close(self) -> None:  # pragma: no cover - optional cleanup hook
        """Backends may override to release connections/resources."""


__all__ = ["PersistenceResult", "StorageError", "TradeStore"]
