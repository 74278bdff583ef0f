"""Validation rules for raw trade field tuples."""

from __future__ import annotations

from decimal import Decimal

import pytest

from trade_processor.ingestion.diagnostics import RecordingSink
from trade_processor.ingestion.validator import (
    TradeValidator,
    parse_trade_amount,
    parse_trade_price,
)


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


def test_validator_accepts_well_formed_fields(sink: RecordingSink) -> None:
    validator = TradeValidator(sink)

    assert validator.validate(["EURUSD", "1000000", "1.2"], 1) is True
    assert sink.messages == []


@pytest.mark.parametrize(
    "fields, expected",
    [
        (["EURUSD", "1000000"], "Line 4 malformed. Only 2 field(s) found."),
        ([""], "Line 4 malformed. Only 1 field(s) found."),
        (["EURUSD", "1", "1.2", "extra"], "Line 4 malformed. Only 4 field(s) found."),
        (["EURUSDX", "1000000", "1.2"], "Trade currencies on line 4 malformed: 'EURUSDX'"),
        (["EUR", "1000000", "1.2"], "Trade currencies on line 4 malformed: 'EUR'"),
        (["EURUSD", "abc", "1.2"], "Trade amount on line 4 not a valid integer: 'abc'"),
        (["EURUSD", "1.5", "1.2"], "Trade amount on line 4 not a valid integer: '1.5'"),
        (["EURUSD", "", "1.2"], "Trade amount on line 4 not a valid integer: ''"),
        (
            ["EURUSD", "3000000000", "1.2"],
            "Trade amount on line 4 not a valid integer: '3000000000'",
        ),
        (["EURUSD", "1000000", "x"], "Trade price on line 4 not a valid decimal: 'x'"),
        (["EURUSD", "1000000", "NaN"], "Trade price on line 4 not a valid decimal: 'NaN'"),
    ],
)
def test_validator_rejects_with_warning(
    sink: RecordingSink, fields: list[str], expected: str
) -> None:
    validator = TradeValidator(sink)

    assert validator.validate(fields, 4) is False
    assert sink.messages == [("WARNING", expected)]


def test_validator_stops_at_first_failing_check(sink: RecordingSink) -> None:
    validator = TradeValidator(sink)

    assert validator.validate(["EURUSDX", "abc", "xyz"], 2) is False
    assert sink.warnings == ["Trade currencies on line 2 malformed: 'EURUSDX'"]


def test_field_count_is_checked_before_currency_pair(
    sink: RecordingSink,
) -> None:
    validator = TradeValidator(sink)

    assert validator.validate(["EURUSDX", "abc"], 9) is False
    assert sink.warnings == ["Line 9 malformed. Only 2 field(s) found."]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("100", 100),
        ("+100", 100),
        ("-250000", -250000),
        (" 42 ", 42),
        ("1_000", None),
        ("1e3", None),
        ("0x10", None),
        ("12.0", None),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("2147483648", None),
        ("-2147483649", None),
        ("99999999999999999999999999", None),
        ("9" * 5000, None),
    ],
)
def test_parse_trade_amount(raw: str, expected: int | None) -> None:
    assert parse_trade_amount(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1.2", Decimal("1.2")),
        ("-0.75", Decimal("-0.75")),
        (".5", Decimal("0.5")),
        ("5.", Decimal("5")),
        ("10", Decimal("10")),
        ("1.23456789012345678901", Decimal("1.23456789012345678901")),
        ("1e5", None),
        ("Infinity", None),
        ("1_0.5", None),
        ("", None),
    ],
)
def test_parse_trade_price(raw: str, expected: Decimal | None) -> None:
    assert parse_trade_price(raw) == expected
