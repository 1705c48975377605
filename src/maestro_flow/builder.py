"""Fluent façade over the command emitters.

``Steps`` carries every command as a chainable method on one owned buffer.
``FlowBuilder`` adds the file header and the finalize/write/reset lifecycle;
nested repeat/retry bodies are plain ``Steps`` with no header.

    flow = FlowBuilder("maestro", "login")
    flow.launch_app(app_id="com.example").tap_on(text="Login").finalize()
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence, Tuple, TypeVar, Union

from .buffer import CommandBuffer
from .commands import (
    app,
    assertion,
    device,
    flow_control,
    interaction,
    recording,
    script,
    text_input,
    wait,
)
from .options import (
    AirplaneModeOptions,
    CopyTextOptions,
    ExtendedWaitOptions,
    LaunchAppOptions,
    LocationOptions,
    LoopOptions,
    OpenLinkOptions,
    RepeatedTapOptions,
    RunFlowOptions,
    RunScriptOptions,
    ScrollUntilVisibleOptions,
    SwipeOptions,
    TapOnOptions,
    TapTargetOptions,
    TravelOptions,
    VisibilityOptions,
)
from .policies import NonEmptyPolicy
from .vocabulary import Direction, KeyType
from .writer import DocumentWriter, base_name, normalize_file_name

logger = logging.getLogger(__name__)

_S = TypeVar("_S", bound="Steps")

# Pre-rendered lines, a ready Steps, or a callable that fills a nested Steps.
StepsBody = Union[Sequence[str], "Steps", Callable[["Steps"], Any]]


class Steps:
    """An ordered list of Maestro commands built through chained calls."""

    def __init__(self) -> None:
        self._buffer = CommandBuffer()

    @property
    def lines(self) -> Tuple[str, ...]:
        return self._buffer.lines

    @property
    def command_count(self) -> int:
        return sum(1 for line in self._buffer if line.startswith("- "))

    def __len__(self) -> int:
        return len(self._buffer)

    def _emit(self: _S, lines: List[str]) -> _S:
        self._buffer.append_all(lines)
        return self

    def _render_body(self, commands: StepsBody) -> List[str]:
        if isinstance(commands, Steps):
            return list(commands.lines)
        if callable(commands):
            nested = Steps()
            commands(nested)
            return list(nested.lines)
        if isinstance(commands, str):
            return [commands]
        return list(commands)

    # App lifecycle ----------------------------------------------------
    def launch_app(self: _S, **options: Any) -> _S:
        return self._emit(app.launch_app(LaunchAppOptions(**options)))

    def kill_app(self: _S, app_id: str | None = None) -> _S:
        return self._emit(app.kill_app(app_id))

    def stop_app(self: _S, app_id: str | None = None) -> _S:
        return self._emit(app.stop_app(app_id))

    def clear_state(self: _S, app_id: str | None = None) -> _S:
        return self._emit(app.clear_state(app_id))

    def clear_keychain(self: _S) -> _S:
        return self._emit(app.clear_keychain())

    # Input ------------------------------------------------------------
    def input_text(self: _S, text: str) -> _S:
        return self._emit(text_input.input_text(text))

    def input_random_email(self: _S) -> _S:
        return self._emit(text_input.input_random_email())

    def input_random_person_name(self: _S) -> _S:
        return self._emit(text_input.input_random_person_name())

    def input_random_number(self: _S, length: int = 8) -> _S:
        return self._emit(text_input.input_random_number(length))

    def input_random_text(self: _S, length: int = 8) -> _S:
        return self._emit(text_input.input_random_text(length))

    def erase_text(self: _S, characters: int | None = None) -> _S:
        return self._emit(text_input.erase_text(characters))

    def hide_keyboard(self: _S) -> _S:
        return self._emit(text_input.hide_keyboard())

    def copy_text_from(self: _S, **options: Any) -> _S:
        return self._emit(text_input.copy_text_from(CopyTextOptions(**options)))

    def paste_text(self: _S) -> _S:
        return self._emit(text_input.paste_text())

    # Interaction ------------------------------------------------------
    def tap_on(self: _S, **options: Any) -> _S:
        """Tap by ``text``, ``id`` or ``point``; see ``TapOnOptions`` for modifiers."""
        return self._emit(interaction.tap_on(TapOnOptions(**options)))

    def double_tap_on(self: _S, **options: Any) -> _S:
        return self._emit(interaction.double_tap_on(TapTargetOptions(**options)))

    def long_press_on(self: _S, **options: Any) -> _S:
        return self._emit(interaction.long_press_on(RepeatedTapOptions(**options)))

    def swipe(self: _S, **options: Any) -> _S:
        return self._emit(interaction.swipe(SwipeOptions(**options)))

    def scroll(self: _S, direction: Direction | str = Direction.DOWN) -> _S:
        return self._emit(interaction.scroll(Direction(direction)))

    def scroll_until_visible(self: _S, **options: Any) -> _S:
        return self._emit(interaction.scroll_until_visible(ScrollUntilVisibleOptions(**options)))

    def back(self: _S) -> _S:
        return self._emit(interaction.back())

    # Assertions -------------------------------------------------------
    def assert_visible(self: _S, **options: Any) -> _S:
        return self._emit(assertion.assert_visible(VisibilityOptions(**options)))

    def assert_not_visible(self: _S, **options: Any) -> _S:
        return self._emit(assertion.assert_not_visible(VisibilityOptions(**options)))

    def assert_true(self: _S, condition: str) -> _S:
        return self._emit(assertion.assert_true(condition))

    def assert_with_ai(self: _S, description: str) -> _S:
        return self._emit(assertion.assert_with_ai(description))

    def assert_no_defects_with_ai(self: _S) -> _S:
        return self._emit(assertion.assert_no_defects_with_ai())

    # Device and media -------------------------------------------------
    def set_airplane_mode(self: _S, enabled: bool) -> _S:
        return self._emit(device.set_airplane_mode(AirplaneModeOptions(enabled=enabled)))

    def toggle_airplane_mode(self: _S) -> _S:
        return self._emit(device.toggle_airplane_mode())

    def set_location(self: _S, latitude: float, longitude: float) -> _S:
        options = LocationOptions(latitude=latitude, longitude=longitude)
        return self._emit(device.set_location(options))

    def travel(self: _S, points: Sequence[Tuple[float, float]], speed: int = 7900) -> _S:
        return self._emit(device.travel(TravelOptions(points=list(points), speed=speed)))

    def press_key(self: _S, key: KeyType | str) -> _S:
        return self._emit(device.press_key(key))

    def add_media(self: _S, *paths: str) -> _S:
        return self._emit(device.add_media(paths))

    def open_link(
        self: _S,
        url: str,
        auto_verify: bool | None = None,
        browser: bool | None = None,
    ) -> _S:
        options = OpenLinkOptions(url=url, auto_verify=auto_verify, browser=browser)
        return self._emit(device.open_link(options))

    def take_screenshot(self: _S, file_name: str = "screenshot") -> _S:
        return self._emit(device.take_screenshot(file_name))

    # Recording --------------------------------------------------------
    def start_recording(self: _S, file_name: str = "recording") -> _S:
        return self._emit(recording.start_recording(file_name))

    def stop_recording(self: _S) -> _S:
        return self._emit(recording.stop_recording())

    # Wait -------------------------------------------------------------
    def wait_for_animation_to_end(self: _S, timeout: int = 5000) -> _S:
        return self._emit(wait.wait_for_animation_to_end(timeout))

    def extended_wait_until(self: _S, **options: Any) -> _S:
        return self._emit(wait.extended_wait_until(ExtendedWaitOptions(**options)))

    # Script and flow --------------------------------------------------
    def eval_script(self: _S, source: str) -> _S:
        return self._emit(script.eval_script(source))

    def run_script(self: _S, source: str, env: Dict[str, str] | None = None) -> _S:
        return self._emit(script.run_script(RunScriptOptions(script=source, env=env)))

    def run_flow(self: _S, file: str, env: Dict[str, str] | None = None) -> _S:
        return self._emit(script.run_flow(RunFlowOptions(file=file, env=env)))

    def extract_text_with_ai(self, description: str) -> str:
        """Emit ``extractTextWithAI`` and return the token later steps can reference."""
        self._emit(script.extract_text_with_ai(description))
        return script.EXTRACTED_TEXT_REF

    # Control flow -----------------------------------------------------
    def repeat(self: _S, times: int, commands: StepsBody) -> _S:
        options = LoopOptions(count=times, commands=self._render_body(commands))
        return self._emit(flow_control.repeat(options))

    def retry(self: _S, max_retries: int, commands: StepsBody) -> _S:
        options = LoopOptions(count=max_retries, commands=self._render_body(commands))
        return self._emit(flow_control.retry(options))


class FlowBuilder(Steps):
    """Builds one flow file under ``path``.

    The buffer always starts with ``# <name>`` and a blank line (plus the
    ``appId`` preamble when ``app_id`` is given). ``finalize()`` writes the
    document, resets the buffer to that header and returns the text.
    """

    def __init__(self, path: Path | str, file_name: str, app_id: str | None = None) -> None:
        NonEmptyPolicy("File name").assert_text(file_name)
        super().__init__()
        self.name = base_name(file_name)
        self.file_name = normalize_file_name(file_name)
        self.app_id = app_id
        self._writer = DocumentWriter(path)
        self.reset()

    @property
    def output_path(self) -> Path:
        return self._writer.target(self.file_name)

    def _preamble(self) -> List[str]:
        lines = [f"# {self.name}"]
        if self.app_id:
            lines += [f"appId: {self.app_id}", "---"]
        lines.append("")
        return lines

    def reset(self) -> None:
        self._buffer.clear()
        self._buffer.append_all(self._preamble())

    def render(self) -> str:
        return self._buffer.text()

    def finalize(self) -> str:
        """Write the document and reset. On ``OSError`` the buffer is kept as-is."""
        document = self.render()
        self._writer.write(self.file_name, document)
        self.reset()
        logger.debug("Finalized %s; buffer reset", self.file_name)
        return document
