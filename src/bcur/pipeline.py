"""Top-level decoding of a bytewords account export.

This module provides decode_export(), which runs the whole pipeline:

    text --bytewords--> body --unwrap--> value tree --map--> Root
"""

from __future__ import annotations

import logging

from .bytewords import Variant
from .bytewords import decode as decode_bytewords
from .config import DecodeConfig
from .container import unwrap
from .mapper import map_root
from .models import Root

logger = logging.getLogger(__name__)


def decode_export(
    text: str,
    variant: Variant = Variant.MINIMAL,
    *,
    separator: str = " ",
    config: DecodeConfig | None = None,
) -> Root:
    """Decode a bytewords-encoded account export.

    Args:
        text: Bytewords string as exported
        variant: Wire form of ``text`` (minimal by default)
        separator: Word separator for ``Variant.STANDARD``
        config: Decode limits (defaults to ``DecodeConfig()``)

    Returns:
        Root record with the export version and its accounts

    Raises:
        MalformedTokenError, UnknownWordError, CorruptWordError, TooShortError,
        ChecksumMismatchError: The bytewords layer is invalid
        ContainerDecodeError: The CBOR/gzip layers are invalid
        SchemaMismatchError: The value tree does not have the expected shape

    Examples:
        ```python
        from bcur import Variant, decode_export

        root = decode_export(text)
        for account in root.accounts:
            print(account.id, account.wallet.name)

        # Space-separated full words
        root = decode_export(words, Variant.STANDARD)
        ```
    """
    body = decode_bytewords(text, variant, separator=separator)
    tree = unwrap(body, config=config)
    root = map_root(tree)

    logger.debug("Decoded export version %d with %d accounts", root.version, len(root.accounts))
    return root
