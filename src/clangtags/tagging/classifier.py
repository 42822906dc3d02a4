"""Decide which cursors become tags."""

from __future__ import annotations

from ..provider.cursor import EXCLUDED_DEFINITION_KINDS, Cursor, CursorKind, Linkage

# Linkage values of entities that are never tagged (locals, unnamed entities)
_UNTAGGED_LINKAGE = frozenset({Linkage.INVALID, Linkage.NO_LINKAGE})


class TagClassifier:
    """Pure predicates over provider-supplied cursor metadata."""

    def __init__(
        self,
        accept_variable_declarations: bool = False,
        include_member_refs: bool = True,
    ) -> None:
        self.accept_variable_declarations = accept_variable_declarations
        self.include_member_refs = include_member_refs

    def is_definition(self, cursor: Cursor) -> bool:
        kind = cursor.kind
        if kind in EXCLUDED_DEFINITION_KINDS:
            return False
        if cursor.is_definition():
            return True
        return self.accept_variable_declarations and kind is CursorKind.VAR_DECL

    def is_reference(self, cursor: Cursor) -> bool:
        kind = cursor.kind
        if kind is CursorKind.DECL_REF_EXPR:
            return True
        return self.include_member_refs and kind is CursorKind.MEMBER_REF_EXPR

    def should_tag(self, cursor: Cursor) -> bool:
        """Check if a cursor is a definition or reference of a linked entity."""
        if not self.is_definition(cursor) and not self.is_reference(cursor):
            return False

        referenced = cursor.referenced
        if referenced is None:
            return False
        return referenced.linkage not in _UNTAGGED_LINKAGE
