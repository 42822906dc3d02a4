"""Parse providers and the cursor model the tagging engine consumes."""

from .cursor import (
    EXCLUDED_DEFINITION_KINDS,
    NAMED_SCOPE_KINDS,
    Cursor,
    CursorKind,
    Linkage,
    SourceExtent,
    SourceLocation,
    VisitResult,
)
from .clang_provider import ClangCursor, ClangProvider
from .protocol import ParseProvider, Visitor

__all__ = [
    # Cursor model
    "Cursor",
    "CursorKind",
    "Linkage",
    "SourceExtent",
    "SourceLocation",
    "VisitResult",
    "NAMED_SCOPE_KINDS",
    "EXCLUDED_DEFINITION_KINDS",
    # Providers
    "ClangCursor",
    "ClangProvider",
    "ParseProvider",
    "Visitor",
]
