"""Symbol definition and reference tagging for C and C++ sources."""

__version__ = "0.1.0"

from .config import TaggerConfig
from .driver import parser, run_parser
from .errors import (
    CacheUnavailableError,
    ClangtagsError,
    ConfigError,
    IncompatibleParamError,
    SpanReadError,
)
from .logging import configure_logging
from .models import PARSER_PARAM_SIZE, ParserParam, Tag, TagKind

__all__ = [
    "__version__",
    # Entry points
    "run_parser",
    "parser",
    # Models
    "ParserParam",
    "Tag",
    "TagKind",
    "PARSER_PARAM_SIZE",
    "TaggerConfig",
    # Logging
    "configure_logging",
    # Errors
    "ClangtagsError",
    "IncompatibleParamError",
    "SpanReadError",
    "CacheUnavailableError",
    "ConfigError",
]
