"""Typed records for a decoded account export."""

from __future__ import annotations

from pydantic import Field

from .base import BaseRecord


class WalletInfo(BaseRecord):
    """Key material and labels of one account's wallet."""

    derivation_path: str = Field(description="BIP-32 derivation path, e.g. m/84'/0'/0'")
    chain_code: str = Field(description="Chain code (base64 when the source held raw bytes)")
    name: str = Field(description="Display name")
    flag_a: bool = Field(description="First wallet flag")
    flag_b: bool = Field(description="Second wallet flag")
    opaque: bytes = Field(description="Opaque byte-string field, kept verbatim")
    xpub: str = Field(description="Extended public key")


class Account(BaseRecord):
    """One exported account."""

    id: int
    index: int
    type: str
    block: int
    wallet: WalletInfo


class Root(BaseRecord):
    """A decoded export: format version plus accounts in source order."""

    version: int
    accounts: tuple[Account, ...] = ()
