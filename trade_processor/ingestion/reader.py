"""Read raw trade lines from a text or byte stream."""

from __future__ import annotations

import io
import re
from typing import IO, AnyStr

ENCODING = "utf-8-sig"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def read_trade_data(stream: IO[AnyStr]) -> list[str]:
    """Drain ``stream`` and return its lines with terminators removed.

    ``\\n``, ``\\r\\n`` and a bare ``\\r`` all end a line. Binary streams are
    decoded as UTF-8. The stream is closed once it has been read, including
    when reading fails.
    """

    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        handle: IO = io.TextIOWrapper(stream, encoding=ENCODING, newline="")
    else:
        handle = stream

    with handle:
        content = handle.read()
    if isinstance(content, bytes):
        content = content.decode(ENCODING)

    lines = _LINE_BREAK_RE.split(content)
    # A terminator on the last line does not start another one.
    if lines[-1] == "":
        lines.pop()
    return lines


__all__ = ["read_trade_data"]
