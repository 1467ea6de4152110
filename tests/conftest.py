# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "checkstyle"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def valid_xml() -> str:
    return load_fixture("valid-checkstyle.xml")


@pytest.fixture
def empty_xml() -> str:
    return load_fixture("empty-checkstyle.xml")


@pytest.fixture
def single_error_xml() -> str:
    return load_fixture("single-error.xml")


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """Keep CHECKSTYLE_SARIF_* env vars and stray .env files out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("CHECKSTYLE_SARIF_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging so they never outlive a test."""
    import logging

    from checkstyle_sarif.core.logging import LOGGER_NAME

    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
