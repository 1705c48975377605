"""App lifecycle commands."""
from __future__ import annotations

from typing import List

from ..formatting import (
    FIELD_INDENT,
    NESTED_INDENT,
    directive,
    field,
    header,
    mapping_block,
    quote,
)
from ..options import LaunchAppOptions


def launch_app(options: LaunchAppOptions) -> List[str]:
    """Bare ``- launchApp`` unless something deviates from the defaults.

    Block order is fixed: appId, clearState, clearKeychain, stopApp,
    permissions, arguments.
    """
    if options.is_default:
        return [directive("launchApp")]

    lines = [header("launchApp")]
    if options.app_id is not None:
        lines.append(field("appId", options.app_id))
    if options.clear_state:
        lines.append(field("clearState", True))
    if options.clear_keychain:
        lines.append(field("clearKeychain", True))
    if not options.stop_app:
        lines.append(field("stopApp", False))
    if options.permissions is not None:
        lines.append(f"{FIELD_INDENT}permissions:")
        for permission, state in options.permissions.items():
            lines.append(f"{NESTED_INDENT}{permission.value}: {quote(state.value)}")
    if options.arguments:
        lines.extend(mapping_block("arguments", options.arguments))
    return lines


def _app_directive(command: str, app_id: str | None) -> List[str]:
    return [directive(command, app_id)]


def kill_app(app_id: str | None = None) -> List[str]:
    return _app_directive("killApp", app_id)


def stop_app(app_id: str | None = None) -> List[str]:
    return _app_directive("stopApp", app_id)


def clear_state(app_id: str | None = None) -> List[str]:
    return _app_directive("clearState", app_id)


def clear_keychain() -> List[str]:
    return [directive("clearKeychain")]
