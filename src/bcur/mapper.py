"""Positional mapping from a CBOR value tree to typed records.

The export is a nest of arrays whose meaning is fixed by position, not by
name::

    [version, [account, ...]]
    account = [id, index, type, block, wallet]
    wallet  = [derivation_path, chain_code, name, flag_a, flag_b, opaque, xpub]

Every positional access is checked. A missing position or a value of the
wrong kind raises SchemaMismatchError naming the offending path, and no
partial record is ever returned. Positions past the last expected one are
ignored.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Sequence
from typing import Any

from .exceptions import SchemaMismatchError
from .models import Account, Root, WalletInfo

logger = logging.getLogger(__name__)


def map_root(tree: Any) -> Root:
    """Map the top-level value tree to a Root record.

    Args:
        tree: Value tree produced by the container unwrapper

    Returns:
        Root with the format version and all accounts in source order

    Raises:
        SchemaMismatchError: If the tree does not have the expected shape
    """
    top = _sequence(tree, "root")
    version = _int(_item(top, 0, "root"), "root[0]")
    entries = _sequence(_item(top, 1, "root"), "accounts")

    accounts = tuple(_map_account(entry, f"accounts[{i}]") for i, entry in enumerate(entries))
    logger.debug("Mapped export version %d with %d accounts", version, len(accounts))

    return Root(version=version, accounts=accounts)


def _map_account(value: Any, path: str) -> Account:
    fields = _sequence(value, path)
    return Account(
        id=_int(_item(fields, 0, path), f"{path}[0]"),
        index=_int(_item(fields, 1, path), f"{path}[1]"),
        type=_str(_item(fields, 2, path), f"{path}[2]"),
        block=_int(_item(fields, 3, path), f"{path}[3]"),
        wallet=_map_wallet(_item(fields, 4, path), f"{path}.wallet"),
    )


def _map_wallet(value: Any, path: str) -> WalletInfo:
    fields = _sequence(value, path)
    return WalletInfo(
        derivation_path=_str(_item(fields, 0, path), f"{path}[0]"),
        chain_code=_text_or_base64(_item(fields, 1, path), f"{path}[1]"),
        name=_str(_item(fields, 2, path), f"{path}[2]"),
        flag_a=_bool(_item(fields, 3, path), f"{path}[3]"),
        flag_b=_bool(_item(fields, 4, path), f"{path}[4]"),
        opaque=_bytes(_item(fields, 5, path), f"{path}[5]"),
        xpub=_str(_item(fields, 6, path), f"{path}[6]"),
    )


def _item(seq: Sequence[Any], index: int, path: str) -> Any:
    if index >= len(seq):
        raise SchemaMismatchError(
            f"{path}: expected an element at position {index}, only {len(seq)} present"
        )
    return seq[index]


def _sequence(value: Any, path: str) -> Sequence[Any]:
    # CBOR arrays decode to lists (or tuples with immutable=True)
    if not isinstance(value, (list, tuple)):
        raise SchemaMismatchError(f"{path}: expected an array, got {_kind(value)}")
    return value


def _int(value: Any, path: str) -> int:
    if isinstance(value, bool):
        raise SchemaMismatchError(f"{path}: expected an integer, got {_kind(value)}")
    if isinstance(value, int):
        return value
    # Integral floats count as integers (the export is also rendered through JSON numbers)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise SchemaMismatchError(f"{path}: expected an integer, got {_kind(value)}")


def _str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise SchemaMismatchError(f"{path}: expected a text string, got {_kind(value)}")
    return value


def _bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise SchemaMismatchError(f"{path}: expected a boolean, got {_kind(value)}")
    return value


def _bytes(value: Any, path: str) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise SchemaMismatchError(f"{path}: expected a byte string, got {_kind(value)}")


def _text_or_base64(value: Any, path: str) -> str:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    return _str(value, path)


def _kind(value: Any) -> str:
    return "null" if value is None else type(value).__name__
