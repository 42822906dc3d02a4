"""Pytest fixtures for clangtags tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any

import pytest

from clangtags.models import ParserParam, Tag, TagKind
from clangtags.provider.cursor import (
    CursorKind,
    Linkage,
    SourceExtent,
    SourceLocation,
    VisitResult,
)

_SELF = object()


class FakeCursor:
    """In-memory cursor for exercising the engine without libclang."""

    def __init__(
        self,
        kind: CursorKind = CursorKind.OTHER,
        spelling: str | None = "",
        *,
        path: str = "",
        line: int = 1,
        column: int = 1,
        offset: int | None = None,
        start: int = 0,
        end: int = 0,
        linkage: Linkage = Linkage.EXTERNAL,
        definition: bool = False,
        parent: FakeCursor | None = None,
        referenced: Any = _SELF,
        children: list[FakeCursor] | None = None,
    ) -> None:
        self.kind = kind
        self.spelling = spelling
        self.path = path
        self.line = line
        self.column = column
        self.offset = start if offset is None else offset
        self.start = start
        self.end = end
        self.linkage = linkage
        self.definition = definition
        self.semantic_parent = parent
        self._referenced = referenced
        self.children = children or []

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(
            path=self.path, line=self.line, column=self.column, offset=self.offset
        )

    @property
    def extent(self) -> SourceExtent:
        return SourceExtent(start=self.start, end=self.end)

    @property
    def referenced(self) -> FakeCursor | None:
        if self._referenced is _SELF:
            return self
        return self._referenced

    def is_definition(self) -> bool:
        return self.definition

    def __repr__(self) -> str:
        return f"FakeCursor({self.kind.value}, {self.spelling!r})"


class FakeProvider:
    """Parse provider over a prebuilt FakeCursor tree.

    Records every lifecycle call in ``events`` so tests can check teardown.
    """

    def __init__(
        self,
        root: FakeCursor | None = None,
        *,
        session_fails: bool = False,
        parse_fails: bool = False,
    ) -> None:
        self.root = root or FakeCursor(CursorKind.TRANSLATION_UNIT)
        self.session_fails = session_fails
        self.parse_fails = parse_fails
        self.events: list[str] = []
        self.visited: list[FakeCursor] = []

    def create_session(self) -> object | None:
        self.events.append("create_session")
        return None if self.session_fails else object()

    def parse_file(self, session, path, args=()):
        self.events.append("parse_file")
        return None if self.parse_fails else self.root

    def visit(self, tree, visitor) -> bool:
        self.events.append("visit")
        return self._visit_children(tree, visitor)

    def _visit_children(self, cursor, visitor) -> bool:
        for child in cursor.children:
            self.visited.append(child)
            result = visitor(child, cursor)
            if result is VisitResult.BREAK:
                return False
            if result is VisitResult.RECURSE and not self._visit_children(child, visitor):
                return False
        return True

    def dispose_tree(self, tree) -> None:
        self.events.append("dispose_tree")

    def dispose_session(self, session) -> None:
        self.events.append("dispose_session")


class TagCollector:
    """Tag sink that records what the engine emits."""

    def __init__(self) -> None:
        self.tags: list[Tag] = []
        self.args: list[Any] = []
        self.warnings: list[str] = []

    def put(self, kind: TagKind, name: str, line: int, path: str, line_text: str, arg: Any) -> None:
        self.tags.append(Tag(kind=kind, name=name, line=line, path=path, line_text=line_text))
        self.args.append(arg)

    def warning(self, fmt: str, *args: Any) -> None:
        self.warnings.append(fmt % args)

    def names(self, kind: TagKind) -> list[str]:
        return [t.name for t in self.tags if t.kind == kind]


def span_of(source: str, needle: str, occurrence: int = 0) -> tuple[int, int]:
    """Return the inclusive byte span of ``needle`` in ``source``."""
    data = source.encode()
    idx = -1
    for _ in range(occurrence + 1):
        idx = data.index(needle.encode(), idx + 1)
    return idx, idx + len(needle.encode()) - 1


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def collector():
    return TagCollector()


@pytest.fixture
def make_param(collector):
    """Build a ParserParam wired to the collector."""

    def _make(path: Path | str, **kwargs: Any) -> ParserParam:
        return ParserParam(
            file=str(path),
            put=collector.put,
            warning=collector.warning,
            arg=kwargs.pop("arg", "ctx"),
            **kwargs,
        )

    return _make
