"""Data models for the plugin resolution pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolutionEntry:
    """A matched dependency and the key it will be exposed under."""

    original_name: str
    final_key: str
    is_scoped: bool = False
    scope_name: str | None = None
    nested: bool = False  # True when exposed under its scope namespace

    @property
    def path(self) -> tuple[str, ...]:
        if self.nested and self.scope_name is not None:
            return (self.scope_name, self.final_key)
        return (self.final_key,)

    @property
    def display_key(self) -> str:
        return ".".join(self.path)
