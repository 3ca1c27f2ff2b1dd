"""Manifest discovery — locate and read the project's package.json."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from load_plugins.exceptions import ConfigNotFoundError, ManifestError

MANIFEST_NAME = "package.json"

DEFAULT_SCOPE = ("dependencies", "devDependencies", "peerDependencies")


class _Discover(enum.Enum):
    DISCOVER = "discover"


# Marks an omitted ``config`` option; explicit None is a configuration error.
DISCOVER = _Discover.DISCOVER


def find_manifest(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) and return the first package.json."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.is_file():
            return candidate
    return None


def read_manifest(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Could not read {path}: {e}") from e
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object")
    return data


def resolve_config(config: Any, cwd: Path | None = None) -> Mapping[str, Any]:
    """Turn the ``config`` option into a parsed manifest mapping.

    Accepts an already-parsed mapping, a path to a manifest file, or
    :data:`DISCOVER` to search upwards from *cwd*.
    """
    if config is DISCOVER:
        found = find_manifest(cwd)
        if found is None:
            raise ConfigNotFoundError()
        return read_manifest(found)
    if config is None:
        raise ConfigNotFoundError()
    if isinstance(config, Mapping):
        return config
    if isinstance(config, (str, Path)):
        path = Path(config)
        if not path.is_file():
            raise ConfigNotFoundError(
                f"Could not find dependencies. {path} does not exist; "
                "do you have a package.json file in your project?"
            )
        return read_manifest(path)
    raise ManifestError(f"Unsupported config of type {type(config).__name__}")


def collect_dependencies(manifest: Mapping[str, Any], scope: Sequence[str]) -> dict[str, str]:
    """Merge the dependency categories named in *scope*, first occurrence wins."""
    deps: dict[str, str] = {}
    for category in scope:
        section = manifest.get(category)
        if section is None:
            continue
        if not isinstance(section, Mapping):
            raise ManifestError(f'"{category}" must be an object mapping names to versions')
        for name, version in section.items():
            deps.setdefault(name, version)
    return deps
