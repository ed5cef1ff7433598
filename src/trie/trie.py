"""Persistent copy-on-write trie.

This module maps character keys to typed values. Operations never modify
the receiver: they rebuild only the nodes on the key's path and share
every other subtree with the previous trie.
"""

from __future__ import annotations

from trie.keys import TrieKey, normalize_key, require_key
from trie.node import (
    StoredValue,
    TrieNode,
    make_stored_value,
    with_child,
    with_value,
    without_value,
)


class Trie:
    """Immutable trie handle rooted at one node.

    Instances are cheap to copy and safe to share between threads because
    no reachable node is ever mutated.
    """

    __slots__ = ("_root",)

    def __init__(self, root: TrieNode | None = None) -> None:
        """Create a trie.

        Args:
            root: Root node, or None for the empty trie.
        """
        self._root = root

    @property
    def root(self) -> TrieNode | None:
        """Root node, None when the trie is empty."""
        return self._root

    @property
    def is_empty(self) -> bool:
        """Whether the trie has no root node."""
        return self._root is None

    def get(self, key: TrieKey, value_type: type | None = None) -> object | None:
        """Look up the value stored under ``key``.

        Args:
            key: Key to look up.
            value_type: Exact type the stored value must have, or None for any.

        Returns:
            Stored value, or None when the key is absent or the stored type
            does not match ``value_type``. A stored None is indistinguishable
            from absence here; use ``lookup`` to tell them apart.

        Raises:
            TrieStoreKeyError: If key type is unsupported.
        """
        stored = self.lookup(key, value_type)
        return None if stored is None else stored.value

    def lookup(self, key: TrieKey, value_type: type | None = None) -> StoredValue | None:
        """Return the tagged payload under ``key``.

        Unlike ``get`` this tells a stored None apart from a missing key.

        Returns:
            Stored payload, or None when the key is absent or the stored
            type does not match ``value_type``.

        Raises:
            TrieStoreKeyError: If key type is unsupported.
        """
        node = self._find(normalize_key(key))
        if node is None or node.stored is None:
            return None
        if not node.stored.matches(value_type):
            return None
        return node.stored

    def put(self, key: TrieKey, value: object, value_type: type | None = None) -> Trie:
        """Return a new trie with ``key`` mapped to ``value``.

        Existing children under ``key`` are preserved and an existing value
        is replaced regardless of its type. The value is stored by reference,
        not copied: mutating a mutable payload after the call changes what
        every snapshot holding it returns.

        Args:
            key: Non-empty key.
            value: Payload to store.
            value_type: Declared type tag, defaults to ``type(value)``.

        Returns:
            New trie sharing all nodes off the key's path.

        Raises:
            TrieStoreKeyError: If key is empty or has an unsupported type.
            TrieStoreValueError: If value does not match value_type.
        """
        chars = require_key(key)
        stored = make_stored_value(value, value_type)
        path, target = self._walk(chars)
        return Trie(_rebuild_path(chars, path, with_value(target, stored)))

    def remove(self, key: TrieKey) -> Trie:
        """Return a trie without the value stored under ``key``.

        The node that held the value stays in place with its children, so
        branches below it are not pruned.

        Args:
            key: Non-empty key.

        Returns:
            New trie, or this same instance when there was nothing to remove.

        Raises:
            TrieStoreKeyError: If key is empty or has an unsupported type.
        """
        chars = require_key(key)
        if self._root is None:
            return self
        path, target = self._walk(chars)
        if target is None or not target.is_value_node:
            return self
        return Trie(_rebuild_path(chars, path, without_value(target)))

    def _find(self, chars: str) -> TrieNode | None:
        node = self._root
        for char in chars:
            if node is None:
                return None
            node = node.child(char)
        return node

    def _walk(self, chars: str) -> tuple[list[TrieNode | None], TrieNode | None]:
        """Collect the existing node above each character and the landing node.

        Missing nodes along the path are reported as None.
        """
        path: list[TrieNode | None] = []
        node = self._root
        for char in chars:
            path.append(node)
            node = node.child(char) if node is not None else None
        return path, node

    def __repr__(self) -> str:
        return f"Trie(root={'None' if self._root is None else hex(id(self._root))})"


def _rebuild_path(chars: str, path: list[TrieNode | None], leaf: TrieNode) -> TrieNode:
    """Copy every node on the path bottom-up, linking in the new leaf.

    Returns:
        New root node.
    """
    node = leaf
    for char, parent in zip(reversed(chars), reversed(path)):
        node = with_child(parent, char, node)
    return node
