"""Scope-qualified names for definition tags."""

from __future__ import annotations

from ..provider.cursor import NAMED_SCOPE_KINDS, Cursor

SCOPE_SEPARATOR = "::"


def build_qualified_name(cursor: Cursor) -> str | None:
    """
    Prefix a cursor's spelling with its enclosing named scopes.

    Walks the semantic parent chain while the parent is a namespace, record,
    enum or class template. A parent that was already visited ends the walk,
    so self-referential parent links terminate.

    Args:
        cursor: A definition cursor.

    Returns:
        The qualified name (e.g. "ns::Widget::draw"), or None when an
        enclosing scope is unnamed and the tag should be dropped.
    """
    name = cursor.spelling or ""
    seen = [cursor]

    parent = cursor.semantic_parent
    while parent is not None and parent.kind in NAMED_SCOPE_KINDS:
        if parent in seen:
            break
        scope = parent.spelling
        if not scope:
            return None
        name = f"{scope}{SCOPE_SEPARATOR}{name}"
        seen.append(parent)
        parent = parent.semantic_parent

    return name
