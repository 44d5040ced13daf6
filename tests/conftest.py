"""Pytest configuration for the pairsum test suite."""

import pytest


# Use anyio (asyncio) for all async tests automatically.
@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"
