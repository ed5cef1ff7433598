"""Persistent trie data structure.

This module holds immutable trie nodes and the copy-on-write trie built
from them. Every operation returns a new trie that shares untouched subtrees.
"""
