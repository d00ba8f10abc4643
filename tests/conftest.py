"""Pytest configuration and shared fixtures."""

import pytest
from typer.testing import CliRunner

from cp1252_codec.cli.app import create_app
from cp1252_codec.core.constants import UNDEFINED_BYTES


@pytest.fixture
def runner() -> CliRunner:
    """Click test runner for invoking the CLI."""
    return CliRunner()


@pytest.fixture
def app():
    """Fresh CLI application."""
    return create_app()


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Expand byte-wide properties over the whole code page."""
    if "cp1252_byte" in metafunc.fixturenames:
        metafunc.parametrize("cp1252_byte", range(256), ids=lambda b: f"0x{b:02X}")
    if "undefined_byte" in metafunc.fixturenames:
        metafunc.parametrize(
            "undefined_byte", sorted(UNDEFINED_BYTES), ids=lambda b: f"0x{b:02X}"
        )
