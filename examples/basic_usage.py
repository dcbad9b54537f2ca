#!/usr/bin/env python3
"""Basic usage example for bcur.

This example demonstrates:
1. Encoding bytes as minimal and standard bytewords
2. Building an account export (CBOR + gzip + CBOR) and encoding it
3. Decoding the export back into typed records
4. Handling a corrupted export
"""

from __future__ import annotations

import gzip

import cbor2

from bcur import DecodeError, Variant, decode_bytewords, decode_export, encode_bytewords


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bcur Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding raw bytes...")
    payload = b"hello"
    minimal = encode_bytewords(payload, Variant.MINIMAL)
    standard = encode_bytewords(payload, Variant.STANDARD)
    print(f"   Payload:  {payload!r}")
    print(f"   Minimal:  {minimal}")
    print(f"   Standard: {standard}")
    print(f"   Decoded:  {decode_bytewords(standard, Variant.STANDARD)!r}")
    print()

    print("2. Building an account export...")
    tree = [
        1,
        [[1, 0, "p2wpkh", 0, ["m/84'/0'/0'", "cc==", "Savings", True, False, b"\x00", "xpub..."]]],
    ]
    body = cbor2.dumps(gzip.compress(cbor2.dumps(tree)))
    text = encode_bytewords(body)
    print(f"   Export body: {len(body)} bytes -> {len(text)} characters")
    print()

    print("3. Decoding the export...")
    root = decode_export(text)
    print(f"   Version: {root.version}")
    for account in root.accounts:
        print(f"   Account {account.id}: {account.wallet.name} ({account.type})")
    print()

    print("4. Decoding a corrupted export...")
    corrupted = text[:-2] + ("ae" if text[-2:] != "ae" else "ad")
    try:
        decode_export(corrupted)
    except DecodeError as e:
        print(f"   {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
