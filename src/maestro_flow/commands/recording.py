"""Screen recording commands."""
from __future__ import annotations

from typing import List

from ..formatting import directive
from ..policies import NonEmptyPolicy


def start_recording(file_name: str = "recording") -> List[str]:
    NonEmptyPolicy("Recording name").assert_text(file_name)
    return [directive("startRecording", file_name)]


def stop_recording() -> List[str]:
    return [directive("stopRecording")]
