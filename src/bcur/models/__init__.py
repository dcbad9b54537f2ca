"""Pydantic records for decoded exports.

This module provides the immutable WalletInfo, Account and Root records
produced by the positional mapper.
"""

from __future__ import annotations

from .base import BaseRecord
from .records import Account, Root, WalletInfo

__all__ = [
    "BaseRecord",
    "WalletInfo",
    "Account",
    "Root",
]
