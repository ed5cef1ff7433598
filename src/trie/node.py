"""Immutable trie nodes.

A node is either plain or carries a stored value; the optional ``stored``
field is the variant tag. Nodes are never mutated once built, so every
constructor here returns a new node and shares child references.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from core.errors import TrieStoreValueError

_EMPTY_CHILDREN: Mapping[str, "TrieNode"] = MappingProxyType({})


def _empty_children() -> Mapping[str, "TrieNode"]:
    return _EMPTY_CHILDREN


@dataclass(frozen=True)
class StoredValue:
    """Type-erased payload with the type tag recorded at insertion.

    Attributes:
        value: Caller payload, shared by reference across cloned nodes.
        value_type: Type the payload was stored as.
    """

    value: object
    value_type: type

    def matches(self, requested_type: type | None) -> bool:
        """Return whether a lookup for ``requested_type`` may see this value.

        Args:
            requested_type: Exact type requested, or None for any type.

        Returns:
            True when no type is requested or the tag is that exact type.
        """
        return requested_type is None or self.value_type is requested_type


@dataclass(frozen=True, eq=False)
class TrieNode:
    """One trie node.

    Attributes:
        children: Read-only mapping from character to child, sorted by character.
        stored: Stored value for terminal nodes, None for plain nodes.
    """

    children: Mapping[str, TrieNode] = field(default_factory=_empty_children)
    stored: StoredValue | None = None

    @property
    def is_value_node(self) -> bool:
        """Whether this node terminates a key."""
        return self.stored is not None

    def child(self, char: str) -> TrieNode | None:
        """Return the child reached through ``char`` if present."""
        return self.children.get(char)


def make_stored_value(value: object, value_type: type | None = None) -> StoredValue:
    """Tag a payload with its stored type.

    Args:
        value: Caller payload.
        value_type: Declared type, or None to use the runtime type.

    Returns:
        Tagged payload.

    Raises:
        TrieStoreValueError: If value is not an instance of the declared type.
    """
    if value_type is None:
        return StoredValue(value=value, value_type=type(value))
    if not isinstance(value, value_type):
        raise TrieStoreValueError(
            f"Value of type {type(value).__name__} cannot be stored as "
            f"{value_type.__name__}. Pass a matching value or omit value_type."
        )
    return StoredValue(value=value, value_type=value_type)


def clone_node(node: TrieNode) -> TrieNode:
    """Shallow copy: same child references and same stored payload."""
    return TrieNode(children=node.children, stored=node.stored)


def with_child(node: TrieNode | None, char: str, child: TrieNode) -> TrieNode:
    """Return a copy of ``node`` whose ``char`` edge points at ``child``.

    A missing node is treated as an empty plain node. Every other edge keeps
    its existing child reference.
    """
    if node is None:
        return TrieNode(children=_freeze_children({char: child}))
    children = dict(node.children)
    children[char] = child
    return TrieNode(children=_freeze_children(children), stored=node.stored)


def with_value(node: TrieNode | None, stored: StoredValue) -> TrieNode:
    """Return a value node that keeps the children of ``node``."""
    if node is None:
        return TrieNode(stored=stored)
    return TrieNode(children=node.children, stored=stored)


def without_value(node: TrieNode) -> TrieNode:
    """Return a plain node that keeps the children of ``node``."""
    return TrieNode(children=node.children)


def _freeze_children(children: dict[str, TrieNode]) -> Mapping[str, TrieNode]:
    return MappingProxyType(dict(sorted(children.items())))
