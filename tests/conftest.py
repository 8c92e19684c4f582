"""Pytest configuration and fixtures for gcd-cli tests."""

from __future__ import annotations

import io
import logging
from typing import Callable, Generator

import pytest


@pytest.fixture(autouse=True)
def reset_logging_disable() -> Generator[None, None, None]:
    """Undo any logging.disable() a CLI run under --quiet leaves behind."""
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def stdin_text(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Replace sys.stdin with the given text."""

    def _set(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _set


@pytest.fixture
def prime_products() -> tuple[int, int, int]:
    """Two composite numbers sharing the factors 3 and 11, and their GCD."""
    return 2 * 3 * 5 * 11 * 17, 3 * 7 * 11 * 13 * 19, 3 * 11
