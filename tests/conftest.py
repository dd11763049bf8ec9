"""Pytest hooks and fixtures."""

import os

import pytest


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "requires_engine: talks to a running trading engine (set VIABTC_LIVE_ENGINE=1)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip requires_engine tests unless a live engine was announced."""
    if os.environ.get("VIABTC_LIVE_ENGINE") == "1":
        return
    skip = pytest.mark.skip(reason="Requires a running trading engine (VIABTC_LIVE_ENGINE=1)")
    for item in items:
        if "requires_engine" in item.keywords:
            item.add_marker(skip)
