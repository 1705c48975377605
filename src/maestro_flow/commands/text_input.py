"""Text entry and clipboard commands."""
from __future__ import annotations

from typing import Any, List, Tuple

from ..formatting import directive, element_command, field, header
from ..options import CopyTextOptions
from ..policies import NonEmptyPolicy


def input_text(text: str) -> List[str]:
    NonEmptyPolicy("Text").assert_text(text)
    return [directive("inputText", text)]


def input_random_email() -> List[str]:
    return [directive("inputRandomEmail")]


def input_random_person_name() -> List[str]:
    return [directive("inputRandomPersonName")]


def _random_input(command: str, length: int) -> List[str]:
    if length < 1:
        raise ValueError("Length must be at least 1.")
    return [header(command), field("length", length)]


def input_random_number(length: int = 8) -> List[str]:
    return _random_input("inputRandomNumber", length)


def input_random_text(length: int = 8) -> List[str]:
    return _random_input("inputRandomText", length)


def erase_text(characters: int | None = None) -> List[str]:
    """Erase everything, or only the last ``characters`` characters."""
    if characters is not None and characters < 0:
        raise ValueError("Characters to erase must not be negative.")
    return [directive("eraseText", characters)]


def hide_keyboard() -> List[str]:
    return [directive("hideKeyboard")]


def copy_text_from(options: CopyTextOptions) -> List[str]:
    fields: List[Tuple[str, Any]] = []
    if options.text is not None:
        fields.append(("text", options.text))
    if options.id is not None:
        fields.append(("id", options.id))
    if options.index is not None:
        fields.append(("index", options.index))
    return element_command("copyTextFrom", fields)


def paste_text() -> List[str]:
    return [directive("pasteText")]
