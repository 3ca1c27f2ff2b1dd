"""Collision detector — guarantee every property key is defined once."""

from __future__ import annotations

from load_plugins.exceptions import KeyCollisionError
from load_plugins.models import ResolutionEntry
from load_plugins.transformer import split_scope


class CollisionDetector:
    """Track the key paths handed out so far and reject duplicates.

    Scope namespaces occupy their top-level name too, so ``@myco/gulp-x``
    (nested under ``myco``) and ``gulp-myco`` cannot coexist.
    """

    def __init__(self) -> None:
        self._keys: dict[tuple[str, ...], ResolutionEntry] = {}
        self._namespaces: dict[str, ResolutionEntry] = {}

    def check(self, entry: ResolutionEntry) -> None:
        existing = self._keys.get(entry.path)
        if existing is None and len(entry.path) == 1:
            existing = self._namespaces.get(entry.final_key)
        if existing is None and entry.nested and entry.scope_name is not None:
            existing = self._keys.get((entry.scope_name,))
        if existing is not None:
            raise KeyCollisionError(
                entry.display_key,
                entry.original_name,
                existing.original_name,
                cross_scope=_scope_of(entry) != _scope_of(existing),
            )

        self._keys[entry.path] = entry
        if entry.nested and entry.scope_name is not None:
            self._namespaces.setdefault(entry.scope_name, entry)


def _scope_of(entry: ResolutionEntry) -> str | None:
    return split_scope(entry.original_name)[0]
