"""Pytest configuration and shared fixtures for gridcut tests."""

from __future__ import annotations

import pytest

from gridcut.application import ComputeLayoutCommand, LayoutInput
from gridcut.application.units import Unit


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests across CLI, config and exporters"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def compute_command() -> ComputeLayoutCommand:
    """Create a ComputeLayoutCommand with default collaborators."""
    return ComputeLayoutCommand()


@pytest.fixture
def panel_input() -> LayoutInput:
    """1200 x 800 mm sheet, 200 x 150 mm pieces, 10 mm margin, 2 mm kerf."""
    return LayoutInput(
        sheet_width=1200,
        sheet_height=800,
        piece_width=200,
        piece_height=150,
        margin=10,
        spacing=2,
        backfill=False,
        unit=Unit.MM,
    )
