"""Per-file entry point of the tagging engine."""

from __future__ import annotations

from contextlib import ExitStack

from .cache_store import CacheStore
from .config import TaggerConfig
from .errors import CacheUnavailableError, IncompatibleParamError
from .logging import get_logger
from .models import PARSER_PARAM_SIZE, ParserParam
from .provider.clang_provider import ClangProvider
from .provider.protocol import ParseProvider
from .tagging.classifier import TagClassifier
from .tagging.span_reader import SpanReader
from .tagging.visitor import TagVisitor

logger = get_logger(__name__)


def run_parser(
    param: ParserParam,
    *,
    provider: ParseProvider | None = None,
    config: TaggerConfig | None = None,
) -> int:
    """
    Tag one source file and hand every tag to ``param.put``.

    A file that can't be parsed or opened yields no tags. A cache that
    can't be opened is reported through ``param.warning`` and tagging
    goes on without it. Every acquired resource is released in reverse
    order of acquisition on all exit paths.

    Args:
        param: Host parameter block.
        provider: Parse provider; libclang when omitted.
        config: Engine policy; read from the environment when omitted.

    Returns:
        Number of tags emitted.

    Raises:
        IncompatibleParamError: If ``param.size`` is below PARSER_PARAM_SIZE.
        ConfigError: If the environment configuration is invalid.
    """
    if param.size < PARSER_PARAM_SIZE:
        raise IncompatibleParamError(param.size, PARSER_PARAM_SIZE)

    if config is None:
        config = TaggerConfig.from_env()
    if provider is None:
        provider = ClangProvider()

    log = logger.bind(path=param.file)

    with ExitStack() as stack:
        session = provider.create_session()
        if session is None:
            log.warning("session_unavailable")
            return 0
        stack.callback(provider.dispose_session, session)

        tree = provider.parse_file(session, param.file)
        if tree is None:
            log.info("parse_failed")
            return 0
        stack.callback(provider.dispose_tree, tree)

        try:
            srcfile = stack.enter_context(open(param.file, "rb"))
        except OSError as e:
            log.info("source_unreadable", reason=str(e))
            return 0

        if config.cache_path:
            try:
                stack.enter_context(CacheStore.open(config.cache_path))
            except CacheUnavailableError as e:
                log.warning("cache_unavailable", cache_path=e.path, reason=e.reason)
                param.warning("%s", str(e))

        visitor = TagVisitor(
            param,
            SpanReader(srcfile, param.file, config.span_strategy),
            TagClassifier(
                accept_variable_declarations=config.accept_variable_declarations,
                include_member_refs=config.include_member_refs,
            ),
        )
        if not provider.visit(tree, visitor):
            log.warning("traversal_aborted", emitted=visitor.emitted)

        log.debug("file_tagged", emitted=visitor.emitted)
        return visitor.emitted


# Entry-point name used by hosts of the parser plugin interface
parser = run_parser
