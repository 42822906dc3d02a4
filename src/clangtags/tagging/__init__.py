"""Tag extraction: classification, qualification, and source spans."""

from .classifier import TagClassifier
from .qualname import SCOPE_SEPARATOR, build_qualified_name
from .span_reader import SpanReader
from .visitor import TagVisitor

__all__ = [
    "TagClassifier",
    "TagVisitor",
    "SpanReader",
    "build_qualified_name",
    "SCOPE_SEPARATOR",
]
