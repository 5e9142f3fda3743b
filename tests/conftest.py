"""Shared test fixtures for sdns tests."""

from __future__ import annotations

import logging
import pathlib

import pytest


@pytest.fixture(autouse=True)
def _reset_sdns_logger():
    """Drop handlers installed by sdns.logs.configure between tests."""
    yield
    logger = logging.getLogger("sdns")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Path to a not-yet-existing sdns.toml in a fresh directory."""
    return tmp_path / "sdns.toml"


@pytest.fixture
def write_config(tmp_path: pathlib.Path):
    """Factory for writing an sdns.toml with the given text."""

    def _create(text: str) -> pathlib.Path:
        path = tmp_path / "sdns.toml"
        path.write_text(text)
        return path

    return _create
