"""Scalar and block rendering for Maestro flow YAML.

Strings are wrapped in double quotes as-is: inner quotes are not escaped, the
caller owns the content. Booleans are lowercase literals. Floats are always
positional decimals (``30.0`` stays a float, ``1e-05`` becomes ``0.00001``).
"""
from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, List, Mapping, Sequence, Tuple

FIELD_INDENT = " " * 4
NESTED_INDENT = " " * 6


class Unquoted(str):
    """Text written as-is, e.g. points (``50%, 25%``) and coordinates."""


def quote(text: str) -> str:
    return f'"{text}"'


def decimal_text(value: float) -> str:
    """Shortest round-tripping digits of ``value`` without an exponent."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot write non-finite number {value!r}.")
    text = format(Decimal(repr(float(value))), "f")
    if "." not in text:
        text += ".0"
    return text


def format_value(value: Any) -> str:
    """Render one scalar the way the Maestro runner expects it."""
    if isinstance(value, Unquoted):
        return str(value)
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return decimal_text(value)
    if isinstance(value, str):
        return quote(value)
    raise TypeError(
        f"Unsupported value type {type(value).__name__!r}; "
        "expected str, bool, int, float or a vocabulary member."
    )


def directive(command: str, value: Any = None) -> str:
    """Top-level entry: ``- command`` or ``- command: value``."""
    if value is None:
        return f"- {command}"
    return f"- {command}: {format_value(value)}"


def header(command: str) -> str:
    return f"- {command}:"


def field(key: str, value: Any) -> str:
    return f"{FIELD_INDENT}{key}: {format_value(value)}"


def nested_field(key: str, value: Any) -> str:
    return f"{NESTED_INDENT}{key}: {format_value(value)}"


def element_command(command: str, fields: Sequence[Tuple[str, Any]]) -> List[str]:
    """Compact ``- command: "label"`` when only a text label survives, else a block.

    ``fields`` holds only the non-default entries, already in output order.
    """
    if len(fields) == 1 and fields[0][0] == "text":
        return [directive(command, fields[0][1])]
    return [header(command)] + [field(key, value) for key, value in fields]


def mapping_block(key: str, mapping: Mapping[str, Any]) -> List[str]:
    """``key:`` followed by one entry per item, in the mapping's own order."""
    lines = [f"{FIELD_INDENT}{key}:"]
    for name, value in mapping.items():
        lines.append(nested_field(str(name), value))
    return lines


def nest(lines: Iterable[str]) -> List[str]:
    """Re-indent rendered command lines so they sit under a ``commands:`` key.

    Entries that carry embedded newlines are split first so every physical
    line gets the same prefix and keeps its relative indentation.
    """
    nested: List[str] = []
    for entry in lines:
        for line in entry.splitlines():
            nested.append(f"{NESTED_INDENT}{line}" if line else line)
    return nested
