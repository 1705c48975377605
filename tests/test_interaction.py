"""Tests for taps, swipes and scrolling."""

import pytest

from maestro_flow import Direction


def test_tap_by_id_with_repeat(steps):
    steps.tap_on(id="btn", repeat=3, delay=200)

    assert steps.lines == ("- tapOn:", '    id: "btn"', "    repeat: 3", "    delay: 200")


def test_tap_full_field_order(steps):
    steps.tap_on(
        text="Button",
        id="submit",
        index=0,
        repeat=3,
        delay=200,
        retry_tap_if_no_change=True,
        wait_to_settle_timeout_ms=1000,
        long_press_on=True,
    )

    assert steps.lines == (
        "- tapOn:",
        '    text: "Button"',
        '    id: "submit"',
        "    index: 0",
        "    repeat: 3",
        "    delay: 200",
        "    retryTapIfNoChange: true",
        "    waitToSettleTimeoutMs: 1000",
        "    longPressOn: true",
    )


def test_delay_without_repeat_is_dropped(steps):
    steps.tap_on(text="Login", delay=500)

    assert steps.lines == ('- tapOn: "Login"',)


def test_tap_on_point(steps):
    steps.tap_on(point="50%, 25%")
    steps.double_tap_on(point=(100, 200))

    assert steps.lines == (
        "- tapOn:",
        "    point: 50%, 25%",
        "- doubleTapOn:",
        "    point: 100, 200",
    )


def test_point_cannot_be_combined_with_text(steps):
    with pytest.raises(ValueError):
        steps.tap_on(text="Login", point="10, 10")
    assert len(steps) == 0


def test_long_press_with_repeat(steps):
    steps.long_press_on(point="75%, 50%", repeat=2, delay=300)

    assert steps.lines == (
        "- longPressOn:",
        "    point: 75%, 50%",
        "    repeat: 2",
        "    delay: 300",
    )


def test_swipe_by_direction(steps):
    steps.swipe(direction=Direction.LEFT, duration=500)

    assert steps.lines == ("- swipe:", "    direction: LEFT", "    duration: 500")


def test_swipe_by_coordinates_uses_default_duration(steps):
    steps.swipe(start_x="10%", start_y="50%", end_x="90%", end_y="50%")

    assert steps.lines == (
        "- swipe:",
        "    start: 10%, 50%",
        "    end: 90%, 50%",
        "    duration: 400",
    )


def test_swipe_direction_wins_over_coordinates(steps):
    steps.swipe(direction="UP", start_x=1, start_y=2, end_x=3, end_y=4)

    assert steps.lines == ("- swipe:", "    direction: UP", "    duration: 400")


def test_swipe_from_element_combines_with_direction(steps):
    steps.swipe(from_element={"id": "carousel_item"}, direction=Direction.RIGHT, duration=600)

    assert steps.lines == (
        "- swipe:",
        "    direction: RIGHT",
        "    from:",
        '      id: "carousel_item"',
        "    duration: 600",
    )


@pytest.mark.parametrize(
    "options",
    [
        {},
        {"start_x": "10%", "start_y": "50%"},
        {"direction": "DIAGONAL"},
    ],
)
def test_invalid_swipes_fail(steps, options):
    with pytest.raises(ValueError):
        steps.swipe(**options)
    assert len(steps) == 0


def test_scroll_defaults_down(steps):
    steps.scroll().scroll(direction=Direction.UP)

    assert steps.lines == (
        "- scroll:",
        "    direction: DOWN",
        "- scroll:",
        "    direction: UP",
    )


def test_scroll_until_visible_block(steps):
    steps.scroll_until_visible(
        id="footer_element",
        direction=Direction.DOWN,
        timeout=30000,
        speed=60,
        visibility_percentage=80,
        center_element=True,
    )

    assert steps.lines == (
        "- scrollUntilVisible:",
        "    element:",
        '      id: "footer_element"',
        "    timeout: 30000",
        "    speed: 60",
        "    visibilityPercentage: 80",
        "    centerElement: true",
    )


def test_scroll_until_visible_rejects_out_of_range_speed(steps):
    with pytest.raises(ValueError):
        steps.scroll_until_visible(text="x", speed=150)


def test_back(steps):
    assert steps.back().lines == ("- back",)
