"""Persistence for finalized flow documents. Only this module touches the filesystem."""
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

FLOW_EXTENSION = ".yaml"
_KNOWN_EXTENSIONS = (".yaml", ".yml")


def normalize_file_name(file_name: str) -> str:
    """Append ``.yaml`` unless the name already carries a YAML extension."""
    if file_name.lower().endswith(_KNOWN_EXTENSIONS):
        return file_name
    return f"{file_name}{FLOW_EXTENSION}"


def base_name(file_name: str) -> str:
    """File name without its YAML extension, used in the header comment."""
    lowered = file_name.lower()
    for extension in _KNOWN_EXTENSIONS:
        if lowered.endswith(extension):
            return file_name[: -len(extension)]
    return file_name


class DocumentWriter:
    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def target(self, file_name: str) -> Path:
        return self.directory / normalize_file_name(file_name)

    def write(self, file_name: str, text: str) -> Path:
        """Create the directory if needed and overwrite the flow file.

        ``OSError`` from either step propagates unchanged.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.target(file_name)
        path.write_text(text, encoding="utf-8")
        logger.debug("Wrote flow %s (%d bytes)", path, len(text.encode("utf-8")))
        return path
