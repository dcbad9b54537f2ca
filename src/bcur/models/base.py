"""Base record class and bcur-specific Pydantic configuration.

This module provides the BaseRecord class that all decoded export records
inherit from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseRecord(BaseModel):
    """Base class for decoded export records.

    Records are immutable once constructed: the positional mapper builds them
    in one go from a fully validated value tree and hands them to the caller.
    """

    model_config = ConfigDict(
        # Values are type-checked by the mapper; no coercion here either
        strict=True,
        frozen=True,
        extra="forbid",
        # Opaque byte fields render as base64 in JSON
        ser_json_bytes="base64",
    )
