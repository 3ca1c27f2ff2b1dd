"""Loader options — validated configuration for a single load."""

from __future__ import annotations

import importlib
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from load_plugins.manifest import DEFAULT_SCOPE, DISCOVER
from load_plugins.transformer import DEFAULT_REPLACE_STRING


class LoaderOptions(BaseModel):
    """Options accepted by :func:`load_plugins.load_plugins`.

    Fields are snake_case; the camelCase names (``overridePattern``,
    ``renameFn``, ``DEBUG``, ...) are accepted as aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        arbitrary_types_allowed=True,
    )

    debug: bool = Field(default=False, alias="DEBUG")
    pattern: list[str] | None = None
    override_pattern: bool = True
    config: Any = DISCOVER
    scope: list[str] = Field(default_factory=lambda: list(DEFAULT_SCOPE))
    replace_string: Any = DEFAULT_REPLACE_STRING
    camelize: bool = True
    lazy: bool = True
    rename: dict[str, str] = Field(default_factory=dict)
    rename_fn: Callable[[str], Any] | None = None
    post_require_transforms: dict[str, Callable[[Any], Any]] = Field(default_factory=dict)
    maintain_scope: bool = True
    require_fn: Callable[[str], Any] = importlib.import_module
    cwd: Path | None = None

    @field_validator("pattern", "scope", mode="before")
    @classmethod
    def _listify(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("replace_string")
    @classmethod
    def _check_replace_string(cls, value: Any) -> Any:
        if isinstance(value, (str, re.Pattern)):
            return value
        raise ValueError("replaceString must be a string or a compiled regular expression")
