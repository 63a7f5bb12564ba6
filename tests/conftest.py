"""Pytest configuration for videotoken tests."""

import pytest

from videotoken.config.loader import clear_config_cache


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against the real Vimeo oEmbed API (requires network)",
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-integration"):
        skip = pytest.mark.skip(reason="needs --run-integration flag")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip)


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Resolve configuration from a clean environment for every test."""
    monkeypatch.delenv("VIDEOTOKEN_OEMBED_ENDPOINT", raising=False)
    monkeypatch.delenv("VIDEOTOKEN_THUMBNAIL_TIMEOUT", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()
