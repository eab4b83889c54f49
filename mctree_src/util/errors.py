"""Exceptions raised by the search tree."""

from __future__ import annotations


class TreeNodeError(Exception):
    pass


class ChildIndexError(TreeNodeError, IndexError):
    """A child index outside ``[0, get_num_children())``."""


class ReleasedNodeError(TreeNodeError, ReferenceError):
    """A released node, or a parent that no longer exists, was used."""
