"""Parse provider backed by libclang."""

from __future__ import annotations

from typing import Sequence

from clang import cindex

from .cursor import (
    NAMED_SCOPE_KINDS,
    CursorKind,
    Linkage,
    SourceExtent,
    SourceLocation,
    VisitResult,
)
from .protocol import Visitor

_KIND_MAP = {
    cindex.CursorKind.NAMESPACE: CursorKind.NAMESPACE,
    cindex.CursorKind.STRUCT_DECL: CursorKind.STRUCT_DECL,
    cindex.CursorKind.UNION_DECL: CursorKind.UNION_DECL,
    cindex.CursorKind.ENUM_DECL: CursorKind.ENUM_DECL,
    cindex.CursorKind.CLASS_DECL: CursorKind.CLASS_DECL,
    cindex.CursorKind.CLASS_TEMPLATE: CursorKind.CLASS_TEMPLATE,
    cindex.CursorKind.CLASS_TEMPLATE_PARTIAL_SPECIALIZATION: (
        CursorKind.CLASS_TEMPLATE_PARTIAL_SPECIALIZATION
    ),
    cindex.CursorKind.CXX_ACCESS_SPEC_DECL: CursorKind.ACCESS_SPECIFIER,
    cindex.CursorKind.TEMPLATE_TYPE_PARAMETER: CursorKind.TEMPLATE_TYPE_PARAMETER,
    cindex.CursorKind.UNEXPOSED_DECL: CursorKind.UNEXPOSED_DECL,
    cindex.CursorKind.VAR_DECL: CursorKind.VAR_DECL,
    cindex.CursorKind.DECL_REF_EXPR: CursorKind.DECL_REF_EXPR,
    cindex.CursorKind.MEMBER_REF_EXPR: CursorKind.MEMBER_REF_EXPR,
    cindex.CursorKind.TRANSLATION_UNIT: CursorKind.TRANSLATION_UNIT,
}

_LINKAGE_MAP = {
    cindex.LinkageKind.INVALID: Linkage.INVALID,
    cindex.LinkageKind.NO_LINKAGE: Linkage.NO_LINKAGE,
    cindex.LinkageKind.INTERNAL: Linkage.INTERNAL,
    cindex.LinkageKind.UNIQUE_EXTERNAL: Linkage.UNIQUE_EXTERNAL,
    cindex.LinkageKind.EXTERNAL: Linkage.EXTERNAL,
}


class ClangCursor:
    """Adapts a ``clang.cindex.Cursor`` to the engine's cursor protocol."""

    __slots__ = ("_cursor",)

    def __init__(self, cursor: cindex.Cursor) -> None:
        self._cursor = cursor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClangCursor):
            return NotImplemented
        return self._cursor == other._cursor

    def __hash__(self) -> int:
        return self._cursor.hash

    def __repr__(self) -> str:
        return f"ClangCursor({self.kind.value}, {self.spelling!r})"

    @property
    def kind(self) -> CursorKind:
        try:
            kind = self._cursor.kind
        except ValueError:
            # Kind id unknown to the Python bindings
            return CursorKind.OTHER
        return _KIND_MAP.get(kind, CursorKind.OTHER)

    @property
    def spelling(self) -> str | None:
        # libclang spells anonymous records "(unnamed struct at ...)"
        if self.kind in NAMED_SCOPE_KINDS and self._cursor.is_anonymous():
            return ""
        return self._cursor.spelling

    @property
    def location(self) -> SourceLocation:
        loc = self._cursor.location
        path = loc.file.name if loc.file is not None else ""
        return SourceLocation(path=path, line=loc.line, column=loc.column, offset=loc.offset)

    @property
    def extent(self) -> SourceExtent:
        start = self._cursor.extent.start.offset
        end = self._cursor.extent.end.offset
        # clang's range end points one past the last byte
        return SourceExtent(start=start, end=max(start, end - 1))

    @property
    def linkage(self) -> Linkage:
        return _LINKAGE_MAP.get(self._cursor.linkage, Linkage.INVALID)

    @property
    def semantic_parent(self) -> ClangCursor | None:
        parent = self._cursor.semantic_parent
        return ClangCursor(parent) if parent is not None else None

    @property
    def referenced(self) -> ClangCursor | None:
        referenced = self._cursor.referenced
        return ClangCursor(referenced) if referenced is not None else None

    def is_definition(self) -> bool:
        return self._cursor.is_definition()


class ClangProvider:
    """Parses C and C++ sources with libclang."""

    def create_session(self) -> cindex.Index | None:
        return cindex.Index.create()

    def parse_file(
        self, session: cindex.Index, path: str, args: Sequence[str] = ()
    ) -> cindex.TranslationUnit | None:
        try:
            return session.parse(path, args=list(args))
        except cindex.TranslationUnitLoadError:
            return None

    def visit(self, tree: cindex.TranslationUnit, visitor: Visitor) -> bool:
        # Explicit stack: expression trees can nest deeper than the recursion limit
        root = tree.cursor
        stack = [(ClangCursor(root), iter(root.get_children()))]
        while stack:
            parent, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                continue
            result = visitor(ClangCursor(child), parent)
            if result is VisitResult.BREAK:
                return False
            if result is VisitResult.RECURSE:
                stack.append((ClangCursor(child), iter(child.get_children())))
        return True

    def dispose_tree(self, tree: cindex.TranslationUnit) -> None:
        # cindex disposes the translation unit when its last reference drops;
        # an explicit clang_disposeTranslationUnit here would free it twice.
        pass

    def dispose_session(self, session: cindex.Index) -> None:
        pass
