"""Module resolver — load plugin modules now or on first access."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Mapping
from typing import Any

from load_plugins.core.logging import get_debug_logger
from load_plugins.models import ResolutionEntry

_UNSET = object()


class LazyValue:
    """A thunk plus a cache cell.

    ``get()`` runs the thunk on first call and returns the cached result
    afterwards. If the thunk raises, nothing is cached.
    """

    __slots__ = ("_thunk", "_value")

    def __init__(self, thunk: Callable[[], Any]) -> None:
        self._thunk = thunk
        self._value: Any = _UNSET

    @property
    def loaded(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> Any:
        if self._value is _UNSET:
            self._value = self._thunk()
            self._thunk = None
        return self._value

    def __repr__(self) -> str:
        if self.loaded:
            return f"LazyValue({self._value!r})"
        return "LazyValue(<pending>)"


class ModuleResolver:
    """Produce the value exposed for each :class:`ResolutionEntry`."""

    def __init__(
        self,
        require_fn: Callable[[str], Any] = importlib.import_module,
        transforms: Mapping[str, Callable[[Any], Any]] | None = None,
        logger: Any = None,
    ) -> None:
        self._require_fn = require_fn
        self._transforms = dict(transforms or {})
        self._log = logger if logger is not None else get_debug_logger(False)

    def resolve(self, entry: ResolutionEntry, lazy: bool = True) -> LazyValue:
        value = LazyValue(lambda: self._load(entry))
        if not lazy:
            value.get()
        return value

    def _load(self, entry: ResolutionEntry) -> Any:
        self._log.info("load_plugins.loading", package=entry.original_name, key=entry.display_key)
        module = self._require_fn(entry.original_name)
        transform = self._transforms.get(entry.display_key) or self._transforms.get(entry.final_key)
        if transform is not None:
            module = transform(module)
        return module
