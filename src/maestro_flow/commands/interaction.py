"""Taps, gestures and scrolling."""
from __future__ import annotations

from typing import Any, List, Tuple

from ..formatting import (
    FIELD_INDENT,
    Unquoted,
    directive,
    element_command,
    field,
    header,
    mapping_block,
    nested_field,
)
from ..options import (
    RepeatedTapOptions,
    ScrollUntilVisibleOptions,
    SwipeOptions,
    TapOnOptions,
    TapTargetOptions,
)
from ..vocabulary import Direction


def _target_fields(options: TapTargetOptions) -> List[Tuple[str, Any]]:
    fields: List[Tuple[str, Any]] = []
    if options.text is not None:
        fields.append(("text", options.text))
    if options.id is not None:
        fields.append(("id", options.id))
    if options.point is not None:
        fields.append(("point", Unquoted(options.point)))
    if options.index is not None:
        fields.append(("index", options.index))
    return fields


def _timing_fields(options: TapTargetOptions) -> List[Tuple[str, Any]]:
    fields: List[Tuple[str, Any]] = []
    if options.retry_tap_if_no_change:
        fields.append(("retryTapIfNoChange", True))
    if options.wait_to_settle_timeout_ms is not None:
        fields.append(("waitToSettleTimeoutMs", options.wait_to_settle_timeout_ms))
    return fields


def _repeat_fields(options: RepeatedTapOptions) -> List[Tuple[str, Any]]:
    # delay only means something between repeats
    if options.repeat > 1:
        return [("repeat", options.repeat), ("delay", options.delay)]
    return []


def tap_on(options: TapOnOptions) -> List[str]:
    fields = _target_fields(options) + _repeat_fields(options) + _timing_fields(options)
    if options.long_press_on:
        fields.append(("longPressOn", True))
    return element_command("tapOn", fields)


def double_tap_on(options: TapTargetOptions) -> List[str]:
    fields = _target_fields(options)
    if options.delay != 100:
        fields.append(("delay", options.delay))
    fields += _timing_fields(options)
    return element_command("doubleTapOn", fields)


def long_press_on(options: RepeatedTapOptions) -> List[str]:
    fields = _target_fields(options) + _repeat_fields(options) + _timing_fields(options)
    return element_command("longPressOn", fields)


def swipe(options: SwipeOptions) -> List[str]:
    lines = [header("swipe")]
    if options.direction is not None:
        lines.append(field("direction", options.direction))
    elif options.has_endpoints:
        lines.append(field("start", Unquoted(f"{options.start_x}, {options.start_y}")))
        lines.append(field("end", Unquoted(f"{options.end_x}, {options.end_y}")))
    if options.from_element:
        lines.extend(mapping_block("from", options.from_element))
    lines.append(field("duration", options.duration))
    return lines


def scroll(direction: Direction = Direction.DOWN) -> List[str]:
    return [header("scroll"), field("direction", Direction(direction))]


def scroll_until_visible(options: ScrollUntilVisibleOptions) -> List[str]:
    """Compact when only a text label is given, otherwise an ``element:`` block."""
    extras: List[Tuple[str, Any]] = []
    if options.direction is not Direction.DOWN:
        extras.append(("direction", options.direction))
    if options.timeout != 20000:
        extras.append(("timeout", options.timeout))
    if options.speed != 40:
        extras.append(("speed", options.speed))
    if options.visibility_percentage != 100:
        extras.append(("visibilityPercentage", options.visibility_percentage))
    if options.center_element:
        extras.append(("centerElement", True))

    if options.id is None and not extras:
        return [directive("scrollUntilVisible", options.text)]

    lines = [header("scrollUntilVisible"), f"{FIELD_INDENT}element:"]
    if options.text is not None:
        lines.append(nested_field("text", options.text))
    if options.id is not None:
        lines.append(nested_field("id", options.id))
    lines.extend(field(key, value) for key, value in extras)
    return lines


def back() -> List[str]:
    return [directive("back")]
