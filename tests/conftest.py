"""Shared pytest fixtures for propguard tests."""

from __future__ import annotations

import pytest

from propguard.config.sources import MappingPropertySource


@pytest.fixture
def app_source() -> MappingPropertySource:
    """A small application config, including malformed values."""
    return MappingPropertySource(
        {
            "port": "9000",
            "timeout": "soon",
            "debug": "on",
            "hosts": "a.example, b.example",
        }
    )
