"""Device state, location, keys, media and links."""
from __future__ import annotations

from typing import List, Sequence

from ..formatting import (
    FIELD_INDENT,
    NESTED_INDENT,
    decimal_text,
    directive,
    field,
    header,
    quote,
)
from ..options import AirplaneModeOptions, LocationOptions, OpenLinkOptions, TravelOptions
from ..policies import NonEmptyPolicy
from ..vocabulary import KeyType


def set_airplane_mode(options: AirplaneModeOptions) -> List[str]:
    return [directive("setAirplaneMode", options.enabled)]


def toggle_airplane_mode() -> List[str]:
    return [directive("toggleAirplaneMode")]


def set_location(options: LocationOptions) -> List[str]:
    return [
        header("setLocation"),
        field("latitude", float(options.latitude)),
        field("longitude", float(options.longitude)),
    ]


def travel(options: TravelOptions) -> List[str]:
    lines = [header("travel"), f"{FIELD_INDENT}points:"]
    for latitude, longitude in options.points:
        lines.append(f"{NESTED_INDENT}- {decimal_text(latitude)},{decimal_text(longitude)}")
    lines.append(field("speed", options.speed))
    return lines


def press_key(key: KeyType | str) -> List[str]:
    """Accepts a ``KeyType`` or its display string (``"Volume Up"``)."""
    return [directive("pressKey", KeyType(key))]


def add_media(paths: Sequence[str]) -> List[str]:
    NonEmptyPolicy("Media paths").assert_items(paths)
    lines = [header("addMedia")]
    for path in paths:
        lines.append(f"{FIELD_INDENT}- {quote(NonEmptyPolicy('Media path').assert_text(path))}")
    return lines


def open_link(options: OpenLinkOptions) -> List[str]:
    if options.auto_verify is None and options.browser is None:
        return [directive("openLink", options.url)]
    lines = [header("openLink"), field("link", options.url)]
    if options.auto_verify is not None:
        lines.append(field("autoVerify", options.auto_verify))
    if options.browser is not None:
        lines.append(field("browser", options.browser))
    return lines


def take_screenshot(file_name: str = "screenshot") -> List[str]:
    NonEmptyPolicy("Screenshot name").assert_text(file_name)
    return [directive("takeScreenshot", file_name)]
