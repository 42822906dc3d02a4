"""Engine configuration for clangtags."""

from __future__ import annotations

import os
from typing import Literal, Mapping

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

# Environment variables read once per driver run
CACHE_ENV = "CLANGTAGS_CACHE"
SPAN_STRATEGY_ENV = "CLANGTAGS_SPAN_STRATEGY"
MEMBER_REFS_ENV = "CLANGTAGS_MEMBER_REFS"
VAR_DECLS_ENV = "CLANGTAGS_VAR_DECLS"

SpanStrategy = Literal["byte_range", "line_count"]


class TaggerConfig(BaseModel):
    """Policy knobs and collaborator locations for one engine run."""

    accept_variable_declarations: bool = Field(
        default=False,
        description="Tag variable declarations the parser does not mark as definitions",
    )
    include_member_refs: bool = Field(
        default=True,
        description="Treat member reference expressions as references",
    )
    span_strategy: SpanStrategy = Field(
        default="byte_range",
        description="How line text is recovered: cursor extent or line counting",
    )
    cache_path: str | None = Field(
        default=None,
        description="Cache store location; the cache is skipped when unset",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TaggerConfig:
        """
        Build a config from environment variables.

        Unset or empty variables keep their defaults.

        Raises:
            ConfigError: If a variable holds an invalid value.
        """
        if environ is None:
            environ = os.environ

        values: dict[str, str] = {}
        for env_name, key in (
            (CACHE_ENV, "cache_path"),
            (SPAN_STRATEGY_ENV, "span_strategy"),
            (MEMBER_REFS_ENV, "include_member_refs"),
            (VAR_DECLS_ENV, "accept_variable_declarations"),
        ):
            raw = environ.get(env_name)
            if raw:
                values[key] = raw

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigError(str(e)) from e
