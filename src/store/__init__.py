"""Versioning layer.

This module keeps the append-only history of trie snapshots and
coordinates concurrent readers with one serialized writer.
"""
