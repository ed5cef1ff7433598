"""Key normalization for trie operations.

Keys are sequences of characters with one trie edge per character.
Byte keys map each byte onto one 8-bit character.
"""

from __future__ import annotations

from core.constants import BYTES_KEY_ENCODING
from core.errors import TrieStoreKeyError

TrieKey = str | bytes | bytearray


def normalize_key(key: TrieKey) -> str:
    """Convert a caller key into its character sequence.

    Args:
        key: String key, or bytes where every byte is one character.

    Returns:
        Character sequence used to walk trie edges.

    Raises:
        TrieStoreKeyError: If key type is unsupported.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, (bytes, bytearray)):
        return bytes(key).decode(BYTES_KEY_ENCODING)
    raise TrieStoreKeyError(
        f"Unsupported key type {type(key).__name__}. Use str or bytes keys."
    )


def require_key(key: TrieKey) -> str:
    """Normalize a key that must name at least one edge.

    Args:
        key: Caller key for a write operation.

    Returns:
        Non-empty character sequence.

    Raises:
        TrieStoreKeyError: If key is empty or has an unsupported type.
    """
    chars = normalize_key(key)
    if not chars:
        raise TrieStoreKeyError(
            "Empty keys cannot be written or removed. Use a key with at least one character."
        )
    return chars
