"""Ordered store of rendered flow lines."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple


class CommandBuffer:
    """Append-only list of lines; ``clear()`` is the only way to drop them."""

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self._lines: List[str] = []
        if lines is not None:
            self.append_all(lines)

    def append(self, line: str) -> None:
        self._lines.append(line)

    def append_all(self, lines: Iterable[str]) -> None:
        self._lines.extend(lines)

    def clear(self) -> None:
        self._lines.clear()

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)
