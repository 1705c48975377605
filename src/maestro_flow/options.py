"""Per-command option models.

Every builder call turns its keyword arguments into one of these frozen
models, so type coercion, range checks and selector rules run before any
line is rendered. Pydantic's ``ValidationError`` is a ``ValueError``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from .policies import ELEMENT_SELECTOR, TAP_SELECTOR, NonEmptyPolicy
from .vocabulary import Direction, Permission, PermissionState

ScalarValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]
Coordinate = Union[StrictInt, StrictStr]
Number = Union[StrictInt, StrictFloat]


class CommandOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


# Element targeting ----------------------------------------------------
class TapTargetOptions(CommandOptions):
    """Target and timing options shared by the tap family."""

    text: str | None = Field(default=None, description="Visible text of the element.")
    id: str | None = Field(default=None, description="Accessibility or resource id.")
    point: str | None = Field(
        default=None, description="Screen point such as '50%, 25%' or '100, 200'."
    )
    index: int | None = Field(default=None, ge=0, description="0-based match index.")
    delay: int = Field(default=100, ge=0, description="Milliseconds between taps.")
    retry_tap_if_no_change: bool = False
    wait_to_settle_timeout_ms: int | None = Field(default=None, ge=0)

    @field_validator("point", mode="before")
    @classmethod
    def _point_text(cls, value: Any) -> Any:
        if isinstance(value, (tuple, list)):
            if len(value) != 2:
                raise ValueError("A point needs exactly two coordinates.")
            return f"{value[0]}, {value[1]}"
        return value

    @model_validator(mode="after")
    def _check_target(self) -> "TapTargetOptions":
        TAP_SELECTOR.assert_target(self.text, self.id, self.point)
        return self


class RepeatedTapOptions(TapTargetOptions):
    repeat: int = Field(default=1, ge=1)


class TapOnOptions(RepeatedTapOptions):
    long_press_on: bool = False


class VisibilityOptions(CommandOptions):
    """Element predicates for assertVisible / assertNotVisible."""

    text: str | None = None
    id: str | None = None
    index: int | None = Field(default=None, ge=0)
    enabled: bool | None = None
    checked: bool | None = None
    focused: bool | None = None
    selected: bool | None = None

    @model_validator(mode="after")
    def _check_target(self) -> "VisibilityOptions":
        ELEMENT_SELECTOR.assert_target(self.text, self.id)
        return self


class CopyTextOptions(CommandOptions):
    text: str | None = None
    id: str | None = None
    index: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_target(self) -> "CopyTextOptions":
        ELEMENT_SELECTOR.assert_target(self.text, self.id)
        return self


class ScrollUntilVisibleOptions(CommandOptions):
    text: str | None = None
    id: str | None = None
    direction: Direction = Direction.DOWN
    timeout: int = Field(default=20000, ge=0)
    speed: int = Field(default=40, ge=0, le=100)
    visibility_percentage: int = Field(default=100, ge=0, le=100)
    center_element: bool = False

    @model_validator(mode="after")
    def _check_target(self) -> "ScrollUntilVisibleOptions":
        ELEMENT_SELECTOR.assert_target(self.text, self.id)
        return self


# Gestures -------------------------------------------------------------
class SwipeOptions(CommandOptions):
    """A swipe by direction, by explicit endpoints, or from an element.

    ``direction`` wins over the endpoints when both are given; ``from_element``
    is rendered independently of the other two.
    """

    direction: Direction | None = None
    start_x: Coordinate | None = None
    start_y: Coordinate | None = None
    end_x: Coordinate | None = None
    end_y: Coordinate | None = None
    from_element: Dict[str, StrictStr] | None = None
    duration: int = Field(default=400, ge=0)

    @property
    def has_endpoints(self) -> bool:
        return None not in (self.start_x, self.start_y, self.end_x, self.end_y)

    @model_validator(mode="after")
    def _check_motion(self) -> "SwipeOptions":
        given = [v for v in (self.start_x, self.start_y, self.end_x, self.end_y) if v is not None]
        if self.direction is None and given and not self.has_endpoints:
            raise ValueError("Swipe coordinates need start_x, start_y, end_x and end_y.")
        if self.direction is None and not self.has_endpoints and not self.from_element:
            raise ValueError("Swipe needs a direction, start/end coordinates or from_element.")
        return self


# App lifecycle --------------------------------------------------------
class LaunchAppOptions(CommandOptions):
    app_id: str | None = Field(default=None, description="Bundle id or package name.")
    clear_state: bool = False
    clear_keychain: bool = False
    stop_app: bool = True
    permissions: Dict[Permission, PermissionState] | None = None
    arguments: Dict[str, ScalarValue] | None = Field(
        default=None,
        description="Launch arguments; values must be str, bool, int or float.",
    )

    @property
    def is_default(self) -> bool:
        return (
            self.app_id is None
            and not self.clear_state
            and not self.clear_keychain
            and self.stop_app
            and self.permissions is None
            and not self.arguments
        )


# Wait -----------------------------------------------------------------
class ExtendedWaitOptions(CommandOptions):
    visible: Dict[str, ScalarValue] | None = None
    not_visible: Dict[str, ScalarValue] | None = None
    timeout: int = Field(default=10000, ge=0)


# Device ---------------------------------------------------------------
class AirplaneModeOptions(CommandOptions):
    enabled: StrictBool


class LocationOptions(CommandOptions):
    latitude: Number
    longitude: Number


class TravelOptions(CommandOptions):
    points: List[Tuple[Number, Number]]
    speed: int = Field(default=7900, ge=1, description="Metres per second.")

    @field_validator("points")
    @classmethod
    def _require_points(cls, points: List[Any]) -> List[Any]:
        NonEmptyPolicy("Points").assert_items(points)
        return points


class OpenLinkOptions(CommandOptions):
    url: str
    auto_verify: bool | None = None
    browser: bool | None = None

    @field_validator("url")
    @classmethod
    def _require_url(cls, url: str) -> str:
        return NonEmptyPolicy("URL").assert_text(url)


# Script / flow --------------------------------------------------------
class RunScriptOptions(CommandOptions):
    script: str
    env: Dict[str, StrictStr] | None = None

    @field_validator("script")
    @classmethod
    def _require_script(cls, script: str) -> str:
        return NonEmptyPolicy("Script").assert_text(script)


class RunFlowOptions(CommandOptions):
    file: str
    env: Dict[str, StrictStr] | None = None

    @field_validator("file")
    @classmethod
    def _require_file(cls, file: str) -> str:
        return NonEmptyPolicy("Flow name").assert_text(file)


# Control flow ---------------------------------------------------------
class LoopOptions(CommandOptions):
    """Count plus already rendered body lines for repeat / retry."""

    count: int = Field(ge=1)
    commands: List[str]

    @field_validator("commands")
    @classmethod
    def _require_commands(cls, commands: List[str]) -> List[str]:
        NonEmptyPolicy("Commands").assert_items(commands)
        return commands
