"""JavaScript, sub-flow and AI extraction commands."""
from __future__ import annotations

from typing import Dict, List

from ..formatting import directive, field, header, mapping_block
from ..options import RunFlowOptions, RunScriptOptions
from ..policies import NonEmptyPolicy

EXTRACTED_TEXT_REF = "${output.extractedText}"


def eval_script(script: str) -> List[str]:
    NonEmptyPolicy("Script").assert_text(script)
    return [directive("evalScript", script)]


def _with_env(command: str, key: str, value: str, env: Dict[str, str] | None) -> List[str]:
    # env=None keeps the compact form; an empty mapping still switches to a block
    if env is None:
        return [directive(command, value)]
    lines = [header(command), field(key, value)]
    if env:
        lines.extend(mapping_block("env", env))
    return lines


def run_script(options: RunScriptOptions) -> List[str]:
    return _with_env("runScript", "script", options.script, options.env)


def run_flow(options: RunFlowOptions) -> List[str]:
    return _with_env("runFlow", "file", options.file, options.env)


def extract_text_with_ai(description: str) -> List[str]:
    """Lines for ``extractTextWithAI``; callers reference the result via ``EXTRACTED_TEXT_REF``."""
    NonEmptyPolicy("Description").assert_text(description)
    return [directive("extractTextWithAI", description)]
