"""Pytest configuration and fixtures."""

import pytest

from maestro_flow import FlowBuilder, Steps


@pytest.fixture
def flow(tmp_path):
    """A builder writing into a per-test directory."""
    return FlowBuilder(tmp_path / "maestro", "sample")


@pytest.fixture
def steps():
    """A header-less command list, handy for asserting exact emitted lines."""
    return Steps()
