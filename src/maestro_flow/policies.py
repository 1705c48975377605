"""Guardrail policies applied before a command reaches the buffer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class NonEmptyPolicy:
    """Rejects empty payloads for commands that cannot run without one."""

    subject: str

    def assert_text(self, value: str | None) -> str:
        if value is None or value == "":
            raise ValueError(f"{self.subject} must not be empty.")
        return value

    def assert_items(self, items: Sequence[Any] | None) -> Sequence[Any]:
        if not items:
            raise ValueError(f"{self.subject} must not be empty.")
        return items


@dataclass(frozen=True)
class SelectorPolicy:
    """Ensures an element command names something to act on."""

    allow_point: bool = False

    def assert_target(
        self,
        text: str | None,
        element_id: str | None,
        point: Any = None,
    ) -> None:
        if point is not None:
            if not self.allow_point:
                raise ValueError("Point targets are not supported by this command.")
            if text is not None or element_id is not None:
                raise ValueError("A point target cannot be combined with text or id.")
            return
        if text is None and element_id is None:
            if self.allow_point:
                raise ValueError("Either text, id or point must be provided.")
            raise ValueError("Either text or id must be provided.")


ELEMENT_SELECTOR = SelectorPolicy()
TAP_SELECTOR = SelectorPolicy(allow_point=True)
