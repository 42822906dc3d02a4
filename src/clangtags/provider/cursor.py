"""Cursor model shared by parse providers and the tagging engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class CursorKind(Enum):
    """The cursor kinds the engine inspects. Everything else is OTHER."""

    NAMESPACE = "namespace"
    STRUCT_DECL = "struct_decl"
    UNION_DECL = "union_decl"
    ENUM_DECL = "enum_decl"
    CLASS_DECL = "class_decl"
    CLASS_TEMPLATE = "class_template"
    CLASS_TEMPLATE_PARTIAL_SPECIALIZATION = "class_template_partial_specialization"
    ACCESS_SPECIFIER = "access_specifier"
    TEMPLATE_TYPE_PARAMETER = "template_type_parameter"
    UNEXPOSED_DECL = "unexposed_decl"
    VAR_DECL = "var_decl"
    DECL_REF_EXPR = "decl_ref_expr"
    MEMBER_REF_EXPR = "member_ref_expr"
    TRANSLATION_UNIT = "translation_unit"
    OTHER = "other"


# Kinds that introduce a qualifiable scope ("ns::Widget::")
NAMED_SCOPE_KINDS = frozenset(
    {
        CursorKind.NAMESPACE,
        CursorKind.STRUCT_DECL,
        CursorKind.UNION_DECL,
        CursorKind.ENUM_DECL,
        CursorKind.CLASS_DECL,
        CursorKind.CLASS_TEMPLATE,
        CursorKind.CLASS_TEMPLATE_PARTIAL_SPECIALIZATION,
    }
)

# Structural kinds that clang reports as definitions but are never tagged
EXCLUDED_DEFINITION_KINDS = frozenset(
    {
        CursorKind.ACCESS_SPECIFIER,
        CursorKind.TEMPLATE_TYPE_PARAMETER,
        CursorKind.UNEXPOSED_DECL,
    }
)


class Linkage(Enum):
    """Visibility of the entity a cursor names."""

    INVALID = "invalid"
    NO_LINKAGE = "no_linkage"
    INTERNAL = "internal"
    UNIQUE_EXTERNAL = "unique_external"
    EXTERNAL = "external"


class VisitResult(Enum):
    """What the visitor tells the provider after each cursor."""

    BREAK = "break"
    CONTINUE = "continue"  # skip the children, go on with siblings
    RECURSE = "recurse"


@dataclass(frozen=True)
class SourceLocation:
    """Spelling location of a cursor.

    Attributes:
        path: File name as reported by the provider ("" when unknown).
        line: 1-based line number.
        column: 1-based column.
        offset: 0-based byte offset into the file.
    """

    path: str
    line: int
    column: int
    offset: int


@dataclass(frozen=True)
class SourceExtent:
    """Byte span of a cursor. Both offsets are inclusive."""

    start: int
    end: int


class Cursor(Protocol):
    """Read-only view of one AST node.

    ``semantic_parent`` and ``referenced`` are lookups, not ownership:
    they may return a fresh object for the same node on every access, so
    cursors are compared with ``==``.
    """

    @property
    def kind(self) -> CursorKind: ...

    @property
    def spelling(self) -> str | None: ...

    @property
    def location(self) -> SourceLocation: ...

    @property
    def extent(self) -> SourceExtent: ...

    @property
    def linkage(self) -> Linkage: ...

    @property
    def semantic_parent(self) -> Cursor | None: ...

    @property
    def referenced(self) -> Cursor | None: ...

    def is_definition(self) -> bool: ...
