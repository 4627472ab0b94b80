"""Pytest configuration and shared fixtures for fence tests."""

from __future__ import annotations

from typing import Any

import pytest

from fences.application.commands import CalculateFenceCommand
from fences.domain import (
    DEFAULT_CATALOGUE,
    CalculatorSettings,
    Catalogue,
    RunFitter,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def catalogue() -> Catalogue:
    return DEFAULT_CATALOGUE


@pytest.fixture
def settings() -> CalculatorSettings:
    """Default settings: 60mm spigots, 100mm maximum gap, no spigot billing."""
    return CalculatorSettings()


@pytest.fixture
def fitter(catalogue: Catalogue) -> RunFitter:
    return RunFitter(catalogue)


@pytest.fixture
def calculate_command() -> CalculateFenceCommand:
    """Create a CalculateFenceCommand using the factory."""
    from fences.application.factory import get_factory

    return get_factory().create_calculate_command()


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def inline_config_data() -> dict[str, Any]:
    """A 5m inline fence with a 900mm gate and billed spigots."""
    return {
        "schema_version": "1.0",
        "shape": {
            "shape": "inline",
            "length": 5000,
            "gate": {"position": 2000, "width": 900},
        },
        "settings": {"include_posts": True},
    }


@pytest.fixture
def rectangle_config_data() -> dict[str, Any]:
    return {
        "schema_version": "1.0",
        "shape": {"shape": "rectangle", "width": 3000, "height": 4000},
    }
