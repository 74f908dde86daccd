"""Shared pytest configuration and fixtures."""

import pytest

from tests.fakes import EchoChatModel, FlakyWriter


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


@pytest.fixture()
def echo_llm() -> EchoChatModel:
    return EchoChatModel()


@pytest.fixture()
def writer() -> FlakyWriter:
    return FlakyWriter()
