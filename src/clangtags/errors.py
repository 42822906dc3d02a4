"""Custom exceptions for clangtags."""


class ClangtagsError(Exception):
    """Base exception for all clangtags errors."""

    pass


class IncompatibleParamError(ClangtagsError):
    """Raised when the caller's parameter block is older than the engine's."""

    def __init__(self, size: int, expected: int):
        self.size = size
        self.expected = expected
        super().__init__(
            f"Parameter block size {size} is smaller than the required {expected}."
        )


class SpanReadError(ClangtagsError):
    """Raised when the source text for a cursor cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read source span from {path}: {reason}")


class CacheUnavailableError(ClangtagsError):
    """Raised when the cache store cannot be opened."""

    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        self.reason = reason
        msg = f"Cache store unavailable at {path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class ConfigError(ClangtagsError):
    """Raised when the environment configuration is invalid."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid clangtags configuration: {reason}")
