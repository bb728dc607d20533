"""
Global test configuration with support for different test types.
"""

import os

import pytest

# Fixtures shipped for downstream users; imported so the suite exercises them.
from safemocker.pytest_plugin import (  # noqa: F401
    action_clients,
    action_metadata_schema,
    authed_action,
    optional_auth_action,
    rate_limited_action,
    safe_action_config,
)


def pytest_configure(config):
    """Register the markers used to select test types."""
    config.addinivalue_line("markers", "unit: fast, isolated tests of one component")
    config.addinivalue_line(
        "markers", "integration: tests exercising several components together"
    )
    config.addinivalue_line(
        "markers", "allow_env_pollution: keep SAFEMOCKER_* variables from the outer environment"
    )


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_safemocker_env(request, monkeypatch):
    """Ensure a clean SAFEMOCKER_* environment for each test.

    Escape hatch: mark a test with @pytest.mark.allow_env_pollution to keep
    the current environment unchanged.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("SAFEMOCKER_"):
            monkeypatch.delenv(key, raising=False)

