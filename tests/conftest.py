"""Shared test fixtures."""

from __future__ import annotations

import pytest

from errchain.chain import ErrorChain
from errchain.log import setup_logging


@pytest.fixture(autouse=True)
def _setup_logging():
    setup_logging(verbose=False)


@pytest.fixture
def abc_chain() -> tuple[ErrorChain, ErrorChain, ErrorChain]:
    """Three links: CError wraps BError wraps AError."""
    a = ErrorChain("AError")
    b = ErrorChain("BError", a)
    c = ErrorChain.create("CError", b)
    return a, b, c


@pytest.fixture
def raised_value_error() -> ValueError:
    """A native exception that carries a real traceback."""
    try:
        raise ValueError("disk gone")
    except ValueError as e:
        return e
