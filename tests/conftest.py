"""Test-layer conftest: marker registration."""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Pytest configuration hook - wire up markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom markers so --strict-markers does not complain."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no browser)")
    config.addinivalue_line("markers", "e2e: End-to-end Selenium tests against a running MusicLMS")
    config.addinivalue_line("markers", "sanity: Smoke checks of the critical paths")
    config.addinivalue_line("markers", "regression: Full regression coverage")
    config.addinivalue_line("markers", "data_driven: Tests parametrized from a data provider")
