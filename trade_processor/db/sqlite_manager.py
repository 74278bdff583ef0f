"""Persistence helpers for the bundled SQLite trade database (SQLAlchemy ORM)."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Sequence, cast

from sqlalchemy import Column, Integer, String, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from trade_processor.db import DEFAULT_SQLITE_DB_PATH
from trade_processor.db.base_backend import PersistenceResult, StorageError
from trade_processor.ingestion.models import TradeRecord
from trade_processor.utils.logger import get_logger

LOGGER = get_logger(__name__)


class Base(DeclarativeBase):
    pass


class _Trade(Base):
    __tablename__ = "trades"

    id = Column(Integer, primary_key=True, autoincrement=True)
    source_currency = Column(String(3), nullable=False)
    destination_currency = Column(String(3), nullable=False)
    lots = Column(Integer, nullable=False)
    # SQLite has no exact decimal type; the canonical string keeps every digit.
    price = Column(String, nullable=False)


class SQLiteManager:
    """Store trades in a SQLite file through a SQLAlchemy session."""

    def __init__(self, db_path: str | Path = DEFAULT_SQLITE_DB_PATH) -> None:
        self.db_path = Path(db_path).expanduser().resolve()
        self.engine: Engine = create_engine(
            f"sqlite:///{self.db_path}",
            echo=False,
            future=True,
        )
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            self.engine.dispose()
            raise StorageError(f"Failed to create SQLite schema: {exc}") from exc
        self._SessionFactory: sessionmaker[Session] = sessionmaker(
            bind=self.engine, expire_on_commit=False, future=True
        )

    def insert_trades(self, rows: Sequence[TradeRecord]) -> PersistenceResult:
        result = PersistenceResult()
        try:
            with self._SessionFactory() as session, session.begin():
                for row in rows:
                    session.add(
                        _Trade(
                            source_currency=row.source_currency,
                            destination_currency=row.destination_currency,
                            lots=row.lots,
                            price=str(row.price),
                        )
                    )
                    result.inserted += 1
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to insert SQLite trades: {exc}") from exc
        LOGGER.debug("Inserted %s rows into %s", result.inserted, self.db_path)
        return result

    def fetch_all(self) -> list[TradeRecord]:
        with self._SessionFactory() as session:
            stmt = select(_Trade).order_by(_Trade.id)
            records: list[TradeRecord] = []
            for row in session.execute(stmt).scalars():
                model = cast(_Trade, row)
                records.append(
                    TradeRecord(
                        source_currency=cast(str, model.source_currency),
                        destination_currency=cast(str, model.destination_currency),
                        lots=cast(int, model.lots),
                        price=Decimal(cast(str, model.price)),
                    )
                )
            return records

    def close(self) -> None:
        self.engine.dispose()

    def __enter__(self) -> "SQLiteManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["SQLiteManager"]
