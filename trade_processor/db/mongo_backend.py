"""MongoDB backend strategy."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Sequence

from bson.decimal128 import Decimal128
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from trade_processor.db.base_backend import PersistenceResult, StorageError, TradeStore
from trade_processor.ingestion.models import TradeRecord
from trade_processor.utils.logger import get_logger

LOGGER = get_logger(__name__)

COLLECTION_NAME = "trades"


class MongoBackend(TradeStore):
    """Backend strategy that persists trades inside MongoDB.

    Batches are written inside a multi-document transaction, which requires the
    server to run as a replica set or sharded cluster.
    """

    def __init__(self, url: str, *, database: str | None = None) -> None:
        self.url = url
        self._client = MongoClient(url)
        db = self._client.get_default_database() if database is None else self._client[database]
        if db is None:
            raise ValueError("MongoDB connection URI must include a database name")
        self._collection: Collection = db[COLLECTION_NAME]

    def ensure_schema(self) -> None:
        try:
            LOGGER.info("Ensuring MongoDB trades collection exists")
            self._client.admin.command("ping")
            self._collection.create_index([("sequence", ASCENDING)])
        except PyMongoError as exc:  # pragma: no cover - error path
            raise StorageError(f"Failed to ensure MongoDB schema: {exc}") from exc

    def insert_trades(self, rows: Sequence[TradeRecord]) -> PersistenceResult:
        result = PersistenceResult()
        if not rows:
            return result
        try:
            with self._client.start_session() as session:
                with session.start_transaction():
                    offset = self._collection.count_documents({}, session=session)
                    for index, row in enumerate(rows):
                        self._collection.insert_one(
                            {
                                "sequence": offset + index,
                                "source_currency": row.source_currency,
                                "destination_currency": row.destination_currency,
                                "lots": row.lots,
                                "price": Decimal128(row.price),
                            },
                            session=session,
                        )
                        result.inserted += 1
        except PyMongoError as exc:
            raise StorageError(f"Failed to insert MongoDB trades: {exc}") from exc
        return result

    def fetch_all(self) -> list[TradeRecord]:
        docs = self._collection.find({}).sort("sequence", ASCENDING)
        return [
            TradeRecord(
                source_currency=doc["source_currency"],
                destination_currency=doc["destination_currency"],
                lots=int(doc["lots"]),
                price=_to_decimal(doc["price"]),
            )
            for doc in docs
        ]

    def close(self) -> None:  # pragma: no cover - trivial cleanup
        self._client.close()


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal128):
        return value.to_decimal()
    return Decimal(str(value))


__all__ = ["MongoBackend"]
