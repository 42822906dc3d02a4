"""AST visitor that turns cursors into tags."""

from __future__ import annotations

from ..errors import SpanReadError
from ..logging import get_logger
from ..models import ParserParam, Tag, TagKind
from ..provider.cursor import Cursor, VisitResult
from .classifier import TagClassifier
from .qualname import build_qualified_name
from .span_reader import SpanReader

logger = get_logger(__name__)


class TagVisitor:
    """Called by the parse provider once per cursor.

    Tags cursors located in the target file and hands them to the host's
    sink. Returns BREAK when the source text for a tag cannot be read,
    RECURSE otherwise. Holds no state between calls beyond the read-only
    session it was built with.
    """

    def __init__(
        self,
        param: ParserParam,
        reader: SpanReader,
        classifier: TagClassifier,
    ) -> None:
        self.param = param
        self.reader = reader
        self.classifier = classifier
        self.emitted = 0

    def __call__(self, cursor: Cursor, parent: Cursor) -> VisitResult:
        location = cursor.location
        path = location.path or ""
        spelling = cursor.spelling or ""

        # The provider also walks into included headers
        if path != self.param.file:
            return VisitResult.RECURSE

        if not self.classifier.should_tag(cursor):
            return VisitResult.RECURSE

        try:
            line_text = self.reader.read(cursor)
        except SpanReadError as e:
            logger.warning("span_read_failed", path=path, line=location.line, reason=e.reason)
            return VisitResult.BREAK

        if self.classifier.is_definition(cursor):
            try:
                name = build_qualified_name(cursor)
            except MemoryError:
                logger.error("qualification_failed", path=path, line=location.line)
                return VisitResult.BREAK
            if name is None:
                logger.debug(
                    "qualification_skipped", name=spelling, path=path, line=location.line
                )
                return VisitResult.RECURSE
            kind = TagKind.DEFINITION
        else:
            name = spelling
            kind = TagKind.REFERENCE

        tag = Tag(kind=kind, name=name, line=location.line, path=path, line_text=line_text)
        logger.debug(
            "tag_emitted",
            kind=tag.kind.name.lower(),
            name=tag.name,
            line=tag.line,
            path=tag.path,
            text=tag.line_text,
        )
        self.param.emit(tag)
        self.emitted += 1
        return VisitResult.RECURSE
