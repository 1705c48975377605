"""Visibility, condition and AI-backed assertions."""
from __future__ import annotations

from typing import Any, List, Tuple

from ..formatting import directive, element_command
from ..options import VisibilityOptions
from ..policies import NonEmptyPolicy


def _visibility(command: str, options: VisibilityOptions) -> List[str]:
    fields: List[Tuple[str, Any]] = []
    if options.text is not None:
        fields.append(("text", options.text))
    if options.id is not None:
        fields.append(("id", options.id))
    if options.index is not None:
        fields.append(("index", options.index))
    for name in ("enabled", "checked", "focused", "selected"):
        value = getattr(options, name)
        if value is not None:
            fields.append((name, value))
    return element_command(command, fields)


def assert_visible(options: VisibilityOptions) -> List[str]:
    return _visibility("assertVisible", options)


def assert_not_visible(options: VisibilityOptions) -> List[str]:
    return _visibility("assertNotVisible", options)


def assert_true(condition: str) -> List[str]:
    NonEmptyPolicy("Condition").assert_text(condition)
    return [directive("assertTrue", condition)]


def assert_with_ai(description: str) -> List[str]:
    NonEmptyPolicy("Description").assert_text(description)
    return [directive("assertWithAI", description)]


def assert_no_defects_with_ai() -> List[str]:
    return [directive("assertNoDefectsWithAi")]
