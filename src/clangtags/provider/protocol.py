"""Protocol definition for parse providers."""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence

from .cursor import Cursor, VisitResult

Visitor = Callable[[Cursor, Cursor], VisitResult]


class ParseProvider(Protocol):
    """Protocol for the compiler front end that produces cursor trees.

    The engine treats sessions and trees as opaque handles. Every handle a
    ``create_session`` or ``parse_file`` call returns is passed to the
    matching dispose method exactly once.
    """

    def create_session(self) -> Any | None:
        """Open a provider session, or return None if none can be created."""
        ...

    def parse_file(self, session: Any, path: str, args: Sequence[str] = ()) -> Any | None:
        """Parse a file into a tree.

        Args:
            session: Handle returned by ``create_session``.
            path: File to parse.
            args: Extra compiler flags.

        Returns:
            Tree handle, or None if the file could not be parsed.
        """
        ...

    def visit(self, tree: Any, visitor: Visitor) -> bool:
        """Walk the tree in pre-order, calling ``visitor(cursor, parent)``.

        Returns:
            False if the visitor stopped the walk with BREAK, True otherwise.
        """
        ...

    def dispose_tree(self, tree: Any) -> None:
        ...

    def dispose_session(self, session: Any) -> None:
        ...
