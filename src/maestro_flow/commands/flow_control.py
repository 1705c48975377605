"""repeat / retry blocks wrapping already rendered command lines."""
from __future__ import annotations

from typing import List

from ..formatting import FIELD_INDENT, field, header, nest
from ..options import LoopOptions


def _loop(command: str, count_key: str, options: LoopOptions) -> List[str]:
    lines = [header(command), field(count_key, options.count), f"{FIELD_INDENT}commands:"]
    lines.extend(nest(options.commands))
    return lines


def repeat(options: LoopOptions) -> List[str]:
    return _loop("repeat", "times", options)


def retry(options: LoopOptions) -> List[str]:
    return _loop("retry", "maxRetries", options)
