"""Synchronisation commands. Both always render as blocks."""
from __future__ import annotations

from typing import List

from ..formatting import field, header, mapping_block
from ..options import ExtendedWaitOptions


def wait_for_animation_to_end(timeout: int = 5000) -> List[str]:
    if timeout < 0:
        raise ValueError("Timeout must not be negative.")
    return [header("waitForAnimationToEnd"), field("timeout", timeout)]


def extended_wait_until(options: ExtendedWaitOptions) -> List[str]:
    lines = [header("extendedWaitUntil"), field("timeout", options.timeout)]
    if options.visible is not None:
        lines.extend(mapping_block("visible", options.visible))
    if options.not_visible is not None:
        lines.extend(mapping_block("notVisible", options.not_visible))
    return lines
