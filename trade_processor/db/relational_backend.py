"""Shared logic for SQL (Postgres/MySQL) backends."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    bindparam,
    create_engine,
    text,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from trade_processor.db.base_backend import PersistenceResult, StorageError, TradeStore
from trade_processor.ingestion.models import TradeRecord
from trade_processor.utils.logger import get_logger

LOGGER = get_logger(__name__)

METADATA = MetaData()

# Declared through SQLAlchemy so the surrogate key DDL matches each dialect.
# Prices are kept as their canonical decimal string; fixed-scale NUMERIC
# columns would round them.
TRADES_TABLE = Table(
    "trades",
    METADATA,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("source_currency", String(3), nullable=False),
    Column("destination_currency", String(3), nullable=False),
    Column("lots", Integer, nullable=False),
    Column("price", Text, nullable=False),
)

INSERT_TRADE_SQL = text(
    """
INSERT INTO trades(source_currency, destination_currency, lots, price)
VALUES(:source_currency, :destination_currency, :lots, :price)
"""
).bindparams(
    bindparam("source_currency", type_=String(3)),
    bindparam("destination_currency", type_=String(3)),
    bindparam("lots", type_=Integer()),
    bindparam("price", type_=Text()),
)

SELECT_TRADES_SQL = text(
    "SELECT source_currency, destination_currency, lots, price FROM trades "
    "ORDER BY id"
).columns(
    source_currency=String(3),
    destination_currency=String(3),
    lots=Integer(),
    price=Text(),
)


class RelationalBackend(TradeStore):
    """Base class that encapsulates SQLAlchemy powered interactions."""

    def __init__(self, url: str) -> None:
        self.url = url
        self._engine_instance: Engine | None = None

    def _get_engine(self) -> Engine:
        if self._engine_instance is None:
            self._engine_instance = create_engine(self.url, future=True)
        return self._engine_instance

    def ensure_schema(self) -> None:
        try:
            engine = self._get_engine()
            with engine.begin() as connection:
                LOGGER.info("Ensuring trades schema exists")
                connection.execute(text("SELECT 1"))
                TRADES_TABLE.create(connection, checkfirst=True)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to ensure trades schema: {exc}") from exc

    def insert_trades(self, rows: Sequence[TradeRecord]) -> PersistenceResult:
        result = PersistenceResult()
        if not rows:
            return result
        try:
            engine = self._get_engine()
            with engine.begin() as connection:
                for row in rows:
                    connection.execute(
                        INSERT_TRADE_SQL,
                        {
                            "source_currency": row.source_currency,
                            "destination_currency": row.destination_currency,
                            "lots": row.lots,
                            "price": str(row.price),
                        },
                    )
                    result.inserted += 1
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to insert trades: {exc}") from exc
        return result

    def fetch_all(self) -> list[TradeRecord]:
        engine = self._get_engine()
        with engine.connect() as connection:
            return [
                TradeRecord(
                    source_currency=mapping["source_currency"],
                    destination_currency=mapping["destination_currency"],
                    lots=int(mapping["lots"]),
                    price=Decimal(mapping["price"]),
                )
                for mapping in connection.execute(SELECT_TRADES_SQL).mappings()
            ]

    def close(self) -> None:  # pragma: no cover - trivial resource cleanup
        if self._engine_instance is not None:
            self._engine_instance.dispose()


__all__ = ["RelationalBackend"]
