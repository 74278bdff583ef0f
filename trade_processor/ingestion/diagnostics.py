"""Diagnostic sinks used to report malformed input and batch summaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from trade_processor.utils.logger import get_logger


class DiagnosticSink(Protocol):
    """Destination for the human readable messages emitted while processing."""

    def warning(self, message: str, *args: object) -> None:
        ...  # pragma: no cover - protocol definition

    def info(self, message: str, *args: object) -> None:
        ...  # pragma: no cover - protocol definition


class LoggingSink:
    """Forward diagnostics to a standard library logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("trade_processor")

    def warning(self, message: str, *args: object) -> None:
        self.logger.warning(message, *args)

    def info(self, message: str, *args: object) -> None:
        self.logger.info(message, *args)


@dataclass(slots=True)
class RecordingSink:
    """Keep every emitted message in memory as ``(level, text)`` pairs."""

    messages: list[tuple[str, str]] = field(default_factory=list)

    def warning(self, message: str, *args: object) -> None:
        self.messages.append(("WARNING", message % args if args else message))

    def info(self, message: str, *args: object) -> None:
        self.messages.append(("INFO", message % args if args else message))

    @property
    def warnings(self) -> list[str]:
        return [text for level, text in self.messages if level == "WARNING"]

    @property
    def infos(self) -> list[str]:
        return [text for level, text in self.messages if level == "INFO"]


__all__ = ["DiagnosticSink", "LoggingSink", "RecordingSink"]
