"""CLI entry point for processing a trade file."""

from __future__ import annotations

from trade_processor import cli

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    cli.main()
