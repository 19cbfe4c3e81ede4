"""Shared test fixtures for foundation drawing tests."""
import pytest
from foundation.config import default_config
from foundation.rebar import plan_grid
from foundation.plan_view import build_plan_data
from foundation.section_view import build_section_data

STAMP = ("2024-01-01 00:00:00", "abc1234")


@pytest.fixture(scope="session")
def config():
    """Default FoundationConfig (8000 x 6000 x 1200, 200 spacing, 50 cover)."""
    return default_config()


@pytest.fixture(scope="session")
def grid(config):
    """Plan grid for the default configuration."""
    return plan_grid(config)


@pytest.fixture(scope="session")
def plan_data(config):
    return build_plan_data(config)


@pytest.fixture(scope="session")
def section_data(config):
    return build_section_data(config)


@pytest.fixture(scope="session")
def stamp():
    return STAMP
