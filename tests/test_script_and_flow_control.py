"""Tests for script, sub-flow and repeat/retry commands."""

import pytest

from maestro_flow import Steps


def test_eval_and_run_script(steps):
    steps.eval_script("Math.random()")
    steps.run_script("console.log('Hello')")
    steps.run_script("process.env.TEST_VAR", env={"TEST_VAR": "test_value", "DEBUG": "true"})

    assert steps.lines == (
        '- evalScript: "Math.random()"',
        "- runScript: \"console.log('Hello')\"",
        "- runScript:",
        '    script: "process.env.TEST_VAR"',
        "    env:",
        '      TEST_VAR: "test_value"',
        '      DEBUG: "true"',
    )


def test_run_script_with_empty_env_is_block_without_env(steps):
    steps.run_script("a.js", env={})

    assert steps.lines == ("- runScript:", '    script: "a.js"')


def test_run_flow(steps):
    steps.run_flow("login_flow.yaml")
    steps.run_flow("login_flow.yaml", env={"USER": "qa"})

    assert steps.lines == (
        '- runFlow: "login_flow.yaml"',
        "- runFlow:",
        '    file: "login_flow.yaml"',
        "    env:",
        '      USER: "qa"',
    )


@pytest.mark.parametrize("method", ["eval_script", "run_script", "run_flow", "extract_text_with_ai"])
def test_empty_script_text_fails(steps, method):
    with pytest.raises(ValueError):
        getattr(steps, method)("")
    assert len(steps) == 0


def test_extract_text_with_ai_returns_placeholder(steps):
    token = steps.extract_text_with_ai("Extract the username from the profile page")
    steps.input_text(token)

    assert token == "${output.extractedText}"
    assert steps.lines == (
        '- extractTextWithAI: "Extract the username from the profile page"',
        '- inputText: "${output.extractedText}"',
    )


def test_repeat_with_rendered_lines(steps):
    steps.repeat(times=3, commands=['- tapOn: "Next"', "- waitForAnimationToEnd"])

    assert steps.lines == (
        "- repeat:",
        "    times: 3",
        "    commands:",
        '      - tapOn: "Next"',
        "      - waitForAnimationToEnd",
    )


def test_retry_with_nested_steps(steps):
    steps.retry(
        max_retries=5,
        commands=lambda body: body.tap_on(text="Retry Button").assert_visible(text="Success"),
    )

    assert steps.lines == (
        "- retry:",
        "    maxRetries: 5",
        "    commands:",
        '      - tapOn: "Retry Button"',
        '      - assertVisible: "Success"',
    )


def test_loops_nest_recursively(steps):
    steps.repeat(
        times=2,
        commands=lambda outer: outer.tap_on(id="btn", repeat=2).retry(
            max_retries=3, commands=lambda inner: inner.back()
        ),
    )

    assert steps.lines == (
        "- repeat:",
        "    times: 2",
        "    commands:",
        "      - tapOn:",
        '          id: "btn"',
        "          repeat: 2",
        "          delay: 100",
        "      - retry:",
        "          maxRetries: 3",
        "          commands:",
        "            - back",
    )


@pytest.mark.parametrize(
    "times, commands",
    [(0, ["- back"]), (2, []), (2, lambda body: None)],
)
def test_invalid_loops_fail_without_mutation(flow, times, commands):
    before = flow.lines

    with pytest.raises(ValueError):
        flow.repeat(times=times, commands=commands)

    assert flow.lines == before


def test_failure_inside_nested_body_leaves_parent_untouched(flow):
    before = flow.lines

    with pytest.raises(ValueError):
        flow.retry(max_retries=2, commands=lambda body: body.back().tap_on())

    assert flow.lines == before


def test_repeat_accepts_prepared_steps(steps):
    body = Steps().tap_on(text="Next").back()
    steps.repeat(times=2, commands=body)

    assert steps.lines == (
        "- repeat:",
        "    times: 2",
        "    commands:",
        '      - tapOn: "Next"',
        "      - back",
    )
