"""Batch parsing of raw trade lines."""

from __future__ import annotations

from typing import Iterable

from trade_processor.ingestion.diagnostics import DiagnosticSink
from trade_processor.ingestion.mapper import map_trade_record
from trade_processor.ingestion.models import TradeRecord
from trade_processor.ingestion.validator import TradeValidator

FIELD_DELIMITER = ","


class TradeParser:
    """Validate and map every line, skipping the ones the validator rejects."""

    def __init__(
        self,
        sink: DiagnosticSink | None = None,
        *,
        validator: TradeValidator | None = None,
    ) -> None:
        self.validator = validator or TradeValidator(sink)

    def parse(self, lines: Iterable[str]) -> list[TradeRecord]:
        trades: list[TradeRecord] = []
        # Line numbers are for humans, so they start at 1 and count skipped lines.
        for line_number, line in enumerate(lines, start=1):
            fields = line.split(FIELD_DELIMITER)
            if self.validator.validate(fields, line_number):
                trades.append(map_trade_record(fields))
        return trades


__all__ = ["FIELD_DELIMITER", "TradeParser"]
