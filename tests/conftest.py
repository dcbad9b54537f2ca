"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import gzip
from typing import Any

import cbor2
import pytest


def wrap_export(tree: Any) -> bytes:
    """Build an export body: CBOR byte string of gzip(CBOR(tree))."""
    return cbor2.dumps(gzip.compress(cbor2.dumps(tree)))


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, bytewords world!"


@pytest.fixture
def sample_tree() -> list[Any]:
    """Value tree of a one-account export."""
    return [
        1,
        [
            [1, 0, "abc", 0, ["m/0", "cc==", "name", True, False, "bytes", "xpub..."]],
        ],
    ]


@pytest.fixture
def sample_body(sample_tree: list[Any]) -> bytes:
    """Export body wrapping sample_tree."""
    return wrap_export(sample_tree)


@pytest.fixture
def wrap() -> Any:
    """Factory turning a value tree into an export body."""
    return wrap_export
