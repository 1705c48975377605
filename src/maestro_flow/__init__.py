"""
maestro_flow – fluent builder for Maestro UI-test flow YAML.

Responsibilities are split as:
 - value quoting and block layout in formatting.py
 - per-command option models in options.py, guard checks in policies.py
 - one emitter module per command family in commands/*
 - the ordered line store in buffer.py
 - the chainable façade in builder.py, file output in writer.py
 - CLI wiring in main.py
"""
from .builder import FlowBuilder, Steps
from .buffer import CommandBuffer
from .vocabulary import Direction, KeyType, Permission, PermissionState
from .writer import DocumentWriter

__all__ = [
    "CommandBuffer",
    "Direction",
    "DocumentWriter",
    "FlowBuilder",
    "KeyType",
    "Permission",
    "PermissionState",
    "Steps",
]
