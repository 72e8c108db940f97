"""Pytest configuration and shared fixtures for LED wall tests."""

from __future__ import annotations

import pytest

from ledwall.application import CalculateLayoutCommand, ModuleCatalog
from ledwall.domain import LayoutCalculationEngine, LedModule, ProjectConfig


# =============================================================================
# pytest-httpx fixture integration
# =============================================================================

# pytest-httpx provides the httpx_mock fixture automatically once installed


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests requiring external services (Ollama, etc.)"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def catalog() -> ModuleCatalog:
    """Built-in module catalog."""
    return ModuleCatalog()


@pytest.fixture
def module(catalog: ModuleCatalog) -> LedModule:
    """Absen PL2.5 Pro: 500x500 mm, 7.5 kg, 130 W, 200x200 px."""
    return catalog.get(3)


@pytest.fixture
def tall_module(catalog: ModuleCatalog) -> LedModule:
    """Absen PL3.9 Lite: 500x1000 mm, 14 kg, 250 W, 128x256 px."""
    return catalog.get(5)


@pytest.fixture
def project() -> ProjectConfig:
    """Default project: 4 x 2.5 m flown on two 1000 kg motors."""
    return ProjectConfig()


@pytest.fixture
def engine() -> LayoutCalculationEngine:
    return LayoutCalculationEngine()


@pytest.fixture
def calculate_command(catalog: ModuleCatalog) -> CalculateLayoutCommand:
    """CalculateLayoutCommand over the built-in catalog."""
    return CalculateLayoutCommand(catalog=catalog)
