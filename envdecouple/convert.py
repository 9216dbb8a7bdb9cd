"""String converters used by the typed environment lookups.

Every converter returns ``None`` when the input cannot be converted instead of
raising, so lookups can substitute the caller's default.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

LOGGER = logging.getLogger(__name__)

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

TRUE_LITERALS = frozenset({"1", "t", "true"})
FALSE_LITERALS = frozenset({"0", "f", "false"})

# Base-prefixed, legacy leading-zero octal or plain decimal. Underscores may
# only sit between digits (or right after a base prefix).
_INT_LITERAL = re.compile(
    r"""
    (?P<sign>[+-]?)
    (?P<body>
        0[xX](?:_?[0-9a-fA-F])+
      | 0[bB](?:_?[01])+
      | 0[oO](?:_?[0-7])+
      | 0(?:_?[0-7])+
      | [1-9](?:_?[0-9])*
      | 0
    )
    """,
    re.VERBOSE,
)

_FIELD_END = re.compile(r"[,\n]")


def parse_int(value: str) -> Optional[int]:
    """Parse ``value`` as a signed 64-bit integer literal.

    Accepts an optional sign, ``0x``/``0o``/``0b`` prefixes, a bare leading
    ``0`` for octal and ``_`` digit separators. Whitespace is not stripped.
    """

    match = _INT_LITERAL.fullmatch(value)
    if match is None:
        return None

    body = match.group("body").replace("_", "")
    if len(body) > 1 and body[0] == "0" and body[1].isdigit():
        number = int(body, 8)
    else:
        number = int(body, 0)
    if match.group("sign") == "-":
        number = -number

    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def parse_bool(value: str) -> Optional[bool]:
    """Parse ``value`` as one of ``1/t/true`` or ``0/f/false`` (any case)."""

    lowered = value.lower()
    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False
    return None


class _MalformedRecord(ValueError):
    """Raised internally when a CSV record breaks the quoting rules."""


def _read_quoted(text: str, pos: int) -> Tuple[str, int]:
    """Read the quoted field opening at ``text[pos]``; return it and the next offset."""

    chunks = []
    pos += 1
    while True:
        end = text.find('"', pos)
        if end < 0:
            raise _MalformedRecord("unterminated quoted field")
        chunks.append(text[pos:end])
        pos = end + 1
        if not text.startswith('"', pos):
            return "".join(chunks), pos
        chunks.append('"')
        pos += 1


def _read_record(text: str) -> Optional[List[str]]:
    pos = 0
    while text.startswith("\n", pos):
        pos += 1
    if pos >= len(text):
        return None

    fields: List[str] = []
    while True:
        if text.startswith('"', pos):
            field, pos = _read_quoted(text, pos)
            if pos < len(text) and text[pos] not in ",\n":
                raise _MalformedRecord(f"extraneous {text[pos]!r} after quoted field")
        else:
            end = _FIELD_END.search(text, pos)
            stop = end.start() if end else len(text)
            field = text[pos:stop]
            if '"' in field:
                raise _MalformedRecord('bare " in unquoted field')
            pos = stop
        fields.append(field)

        if pos >= len(text) or text[pos] == "\n":
            return fields
        pos += 1


def parse_csv_row(value: str) -> Optional[List[str]]:
    """Return the fields of the first CSV record in ``value``.

    Fields are separated by commas. A field that starts with a double quote
    runs to the matching closing quote, may span lines, and uses ``""`` for a
    literal quote. A quote anywhere else, text after a closing quote, or an
    unterminated quote makes the record malformed. Blank lines before the
    record are skipped and ``\\r\\n`` counts as ``\\n``. ``None`` is returned
    for an empty or malformed input.
    """

    text = value.replace("\r\n", "\n")
    if text.endswith("\r"):
        text = text[:-1]
    try:
        return _read_record(text)
    except _MalformedRecord as exc:
        LOGGER.debug("Rejecting malformed CSV row: %s", exc)
        return None


def clamp(value: int, minval: int, maxval: int) -> int:
    """Clamp ``value`` into ``[minval, maxval]``.

    The lower bound is checked first, so ``minval`` wins if the bounds are
    inverted.
    """

    if value < minval:
        return minval
    if value > maxval:
        return maxval
    return value


__all__ = ["clamp", "parse_bool", "parse_csv_row", "parse_int"]
