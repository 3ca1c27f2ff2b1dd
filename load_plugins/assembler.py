"""Assembler — build the object exposing every resolved plugin."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from load_plugins.models import ResolutionEntry
from load_plugins.resolver import LazyValue


class PluginNamespace:
    """Read-only namespace of plugins, by attribute or by item.

    Lazy entries are loaded on first read. Scope namespaces are nested
    ``PluginNamespace`` instances.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        object.__setattr__(self, "_entries", {})

    def _define(self, key: str, value: LazyValue | PluginNamespace) -> None:
        if key in self._entries:
            raise ValueError(f"property {key!r} is already defined")
        self._entries[key] = value

    def _child(self, key: str) -> PluginNamespace:
        child = self._entries.get(key)
        if child is None:
            child = PluginNamespace()
            self._define(key, child)
        elif not isinstance(child, PluginNamespace):
            raise ValueError(f"property {key!r} is not a namespace")
        return child

    def _read(self, key: str) -> Any:
        value = self._entries[key]
        if isinstance(value, LazyValue):
            return value.get()
        return value

    def __getattr__(self, name: str) -> Any:
        try:
            entries = object.__getattribute__(self, "_entries")
        except AttributeError:
            raise AttributeError(name) from None
        if name not in entries:
            raise AttributeError(f"no plugin named {name!r}")
        return self._read(name)

    def __getitem__(self, key: str) -> Any:
        if key not in self._entries:
            raise KeyError(key)
        return self._read(key)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("PluginNamespace is read-only")

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._entries))

    def __repr__(self) -> str:
        return f"PluginNamespace({', '.join(self._entries)})"


def assemble(pairs: Iterable[tuple[ResolutionEntry, LazyValue]]) -> PluginNamespace:
    root = PluginNamespace()
    for entry, value in pairs:
        target = root
        for part in entry.path[:-1]:
            target = target._child(part)
        target._define(entry.path[-1], value)
    return root


def is_loaded(namespace: PluginNamespace, key: str) -> bool:
    """Whether reading ``namespace[key]`` would not trigger a load."""
    value = namespace._entries[key]
    return not isinstance(value, LazyValue) or value.loaded
