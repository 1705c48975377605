"""Tests for app lifecycle commands."""

from datetime import datetime

import pytest

from maestro_flow import Permission, PermissionState


def test_bare_launch(steps):
    assert steps.launch_app().lines == ("- launchApp",)


def test_launch_with_defaults_spelled_out_stays_bare(steps):
    steps.launch_app(clear_state=False, stop_app=True, arguments={})

    assert steps.lines == ("- launchApp",)


def test_launch_with_app_id(steps):
    steps.launch_app(app_id="com.example.app")

    assert steps.lines == ("- launchApp:", '    appId: "com.example.app"')


def test_launch_with_all_options(steps):
    steps.launch_app(
        app_id="com.example.app",
        clear_state=True,
        clear_keychain=True,
        stop_app=False,
        permissions={"notifications": "deny", Permission.LOCATION: PermissionState.ALLOW},
        arguments={"testMode": True, "username": "test_user", "timeout": 30.0, "retries": 5},
    )

    assert steps.lines == (
        "- launchApp:",
        '    appId: "com.example.app"',
        "    clearState: true",
        "    clearKeychain: true",
        "    stopApp: false",
        "    permissions:",
        '      notifications: "deny"',
        '      location: "allow"',
        "    arguments:",
        "      testMode: true",
        '      username: "test_user"',
        "      timeout: 30.0",
        "      retries: 5",
    )


@pytest.mark.parametrize("bad_value", [None, [1, 2], {"a": 1}, datetime(2024, 1, 1)])
def test_launch_argument_types_are_restricted(flow, bad_value):
    """Only str, bool, int and float arguments are accepted; nothing is appended otherwise."""
    before = len(flow)

    with pytest.raises(ValueError):
        flow.launch_app(arguments={"ok": 1, "bad": bad_value})

    assert len(flow) == before


def test_unknown_permission_is_rejected(steps):
    with pytest.raises(ValueError):
        steps.launch_app(permissions={"teleport": "allow"})
    assert len(steps) == 0


@pytest.mark.parametrize(
    "method, keyword",
    [("kill_app", "killApp"), ("stop_app", "stopApp"), ("clear_state", "clearState")],
)
def test_app_directives(steps, method, keyword):
    getattr(steps, method)()
    getattr(steps, method)(app_id="com.example.app")

    assert steps.lines == (f"- {keyword}", f'- {keyword}: "com.example.app"')


def test_clear_keychain(steps):
    assert steps.clear_keychain().lines == ("- clearKeychain",)
