"""Closed vocabularies written verbatim into Maestro flows."""
from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Scroll and swipe directions."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class KeyType(str, Enum):
    """Physical and virtual keys understood by `pressKey`."""

    HOME = "Home"
    LOCK = "Lock"
    ENTER = "Enter"
    BACKSPACE = "Backspace"
    VOLUME_UP = "Volume Up"
    VOLUME_DOWN = "Volume Down"
    BACK = "Back"
    POWER = "Power"
    TAB = "Tab"
    REMOTE_DPAD_UP = "Remote Dpad Up"
    REMOTE_DPAD_DOWN = "Remote Dpad Down"
    REMOTE_DPAD_LEFT = "Remote Dpad Left"
    REMOTE_DPAD_RIGHT = "Remote Dpad Right"
    REMOTE_DPAD_CENTER = "Remote Dpad Center"
    REMOTE_MEDIA_PLAY_PAUSE = "Remote Media Play Pause"
    REMOTE_MEDIA_STOP = "Remote Media Stop"
    REMOTE_MEDIA_NEXT = "Remote Media Next"
    REMOTE_MEDIA_PREVIOUS = "Remote Media Previous"
    REMOTE_MEDIA_REWIND = "Remote Media Rewind"
    REMOTE_MEDIA_FAST_FORWARD = "Remote Media Fast Forward"
    REMOTE_SYSTEM_NAVIGATION_UP = "Remote System Navigation Up"
    REMOTE_SYSTEM_NAVIGATION_DOWN = "Remote System Navigation Down"
    REMOTE_BUTTON_A = "Remote Button A"
    REMOTE_BUTTON_B = "Remote Button B"
    REMOTE_MENU = "Remote Menu"
    TV_INPUT = "TV Input"
    TV_INPUT_HDMI_1 = "TV Input HDMI 1"
    TV_INPUT_HDMI_2 = "TV Input HDMI 2"
    TV_INPUT_HDMI_3 = "TV Input HDMI 3"


class Permission(str, Enum):
    """App permissions that `launchApp` can preset."""

    ALL = "all"
    CALENDAR = "calendar"
    CAMERA = "camera"
    CONTACTS = "contacts"
    LOCATION = "location"
    MEDIA_LIBRARY = "medialibrary"
    MICROPHONE = "microphone"
    NOTIFICATIONS = "notifications"
    BLUETOOTH = "bluetooth"
    PHONE = "phone"
    STORAGE = "storage"
    SMS = "sms"


class PermissionState(str, Enum):
    ALLOW = "allow"
    DENY = "deny"
    UNSET = "unset"


VOCABULARIES = {
    "direction": Direction,
    "key": KeyType,
    "permission": Permission,
    "state": PermissionState,
}
