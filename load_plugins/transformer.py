"""Name transformer — turn a dependency name into its property key."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from load_plugins.exceptions import InvalidKeyError
from load_plugins.models import ResolutionEntry

DEFAULT_REPLACE_STRING = re.compile(r"^gulp[-.]")

_SCOPED_RE = re.compile(r"^@([^/]+)/(.+)$")
_SEPARATOR_RE = re.compile(r"[^0-9A-Za-z]+")


def split_scope(name: str) -> tuple[str | None, str]:
    """``@scope/rest`` -> ``("scope", "rest")``; unscoped -> ``(None, name)``."""
    m = _SCOPED_RE.match(name)
    if m:
        return m.group(1), m.group(2)
    return None, name


def strip_prefix(name: str, replace_string: str | re.Pattern[str]) -> str:
    if isinstance(replace_string, re.Pattern):
        return replace_string.sub("", name, count=1)
    if replace_string and name.startswith(replace_string):
        return name[len(replace_string) :]
    return name


def camelize(name: str) -> str:
    """``foo-bar.baz`` -> ``fooBarBaz``."""
    segments = [s for s in _SEPARATOR_RE.split(name) if s]
    if not segments:
        return ""
    head, *tail = segments
    return head.lower() + "".join(s[:1].upper() + s[1:] for s in tail)


def default_rename(
    name: str,
    replace_string: str | re.Pattern[str] = DEFAULT_REPLACE_STRING,
    camelize_name: bool = True,
) -> str:
    _, rest = split_scope(name)
    key = strip_prefix(rest, replace_string)
    return camelize(key) if camelize_name else key


class NameTransformer:
    """Map matched dependency names to :class:`ResolutionEntry` records.

    Precedence: the rename table, then a custom ``rename_fn``, then
    :func:`default_rename`. Explicit renames are used verbatim.
    """

    def __init__(
        self,
        *,
        replace_string: str | re.Pattern[str] = DEFAULT_REPLACE_STRING,
        camelize: bool = True,
        maintain_scope: bool = True,
        rename: Mapping[str, str] | None = None,
        rename_fn: Callable[[str], Any] | None = None,
    ) -> None:
        self._replace_string = replace_string
        self._camelize = camelize
        self._maintain_scope = maintain_scope
        self._rename = dict(rename or {})
        self._rename_fn = rename_fn

    def transform(self, name: str) -> ResolutionEntry:
        scope, rest = split_scope(name)
        key = self._key_for(name, scope, rest)
        if not isinstance(key, str) or not key:
            raise InvalidKeyError(name, key)
        nested = scope is not None and self._maintain_scope
        return ResolutionEntry(
            original_name=name,
            final_key=key,
            is_scoped=scope is not None,
            scope_name=scope,
            nested=nested,
        )

    def _key_for(self, name: str, scope: str | None, rest: str) -> Any:
        if name in self._rename:
            return self._rename[name]
        if scope is not None and rest in self._rename:
            return self._rename[rest]
        if self._rename_fn is not None:
            return self._rename_fn(name)
        return default_rename(name, self._replace_string, self._camelize)
