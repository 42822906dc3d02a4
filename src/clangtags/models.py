"""Data models for clangtags."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable

# Number of fields the engine reads from ParserParam. A host built against
# an older parameter block reports a smaller value and is refused.
PARSER_PARAM_SIZE = 5


class TagKind(IntEnum):
    """Kind of an emitted tag, numbered like the host's parser codes."""

    DEFINITION = 1
    REFERENCE = 2


@dataclass(frozen=True)
class Tag:
    """A definition or reference found in the target file."""

    kind: TagKind
    name: str  # "ns::Widget::draw" for definitions, bare spelling for references
    line: int  # 1-based
    path: str  # as reported by the parse provider
    line_text: str  # newline stripped

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.name.lower(),
            "name": self.name,
            "line": self.line,
            "path": self.path,
            "line_text": self.line_text,
        }


PutCallback = Callable[[TagKind, str, int, str, str, Any], None]
WarningCallback = Callable[..., None]


def _ignore_warning(fmt: str, *args: Any) -> None:
    pass


@dataclass
class ParserParam:
    """Per-file parameter block handed to the engine by its host.

    Attributes:
        file: Path of the file to tag. Only cursors whose location reports
            exactly this path are tagged.
        put: Tag sink, called as ``put(kind, name, line, path, line_text, arg)``.
        warning: Warning channel, called printf-style as ``warning(fmt, *args)``.
        arg: Opaque caller context passed back to ``put`` unchanged.
        size: Parameter block size used for the compatibility check.
    """

    file: str
    put: PutCallback
    warning: WarningCallback = field(default=_ignore_warning)
    arg: Any = None
    size: int = PARSER_PARAM_SIZE

    def emit(self, tag: Tag) -> None:
        """Hand a tag to the host's sink."""
        self.put(tag.kind, tag.name, tag.line, tag.path, tag.line_text, self.arg)
