"""CLI entry point: load-plugins.

Subcommands:
    load-plugins list                      # Show which key each plugin gets
    load-plugins list --json               # Same, as JSON
    load-plugins check --config pkg.json   # Import every plugin and report failures
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from typing import Any

import click
from pydantic import ValidationError

from load_plugins.core.logging import setup_logging
from load_plugins.exceptions import LoadPluginsError
from load_plugins.loader import load_plugins, plan_plugins
from load_plugins.manifest import DISCOVER
from load_plugins.options import LoaderOptions


def _parse_rename(pairs: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated ``NAME=KEY`` flags."""
    rename: dict[str, str] = {}
    for pair in pairs:
        name, sep, key = pair.partition("=")
        if not sep or not name or not key:
            raise click.BadParameter(f"expected NAME=KEY, got {pair!r}", param_hint="--rename")
        rename[name] = key
    return rename


def _plugin_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every subcommand that resolves plugins."""
    options = [
        click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
                     default=None, help="Manifest to read (default: nearest package.json)"),
        click.option("--pattern", "patterns", multiple=True, help="Glob pattern (repeatable)"),
        click.option("--extend", is_flag=True, help="Add --pattern to the defaults instead of replacing them"),
        click.option("--replace-string", default=None, help="Literal prefix to strip from names"),
        click.option("--no-camelize", is_flag=True, help="Keep names as-is instead of camelCasing"),
        click.option("--flatten-scopes", is_flag=True, help="Expose @scope/name plugins at the top level"),
        click.option("--scope", "scopes", multiple=True, help="Dependency category to scan (repeatable)"),
        click.option("--rename", "renames", multiple=True, help="Explicit NAME=KEY rename (repeatable)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_options(
    config_path: str | None,
    patterns: tuple[str, ...],
    extend: bool,
    replace_string: str | None,
    no_camelize: bool,
    flatten_scopes: bool,
    scopes: tuple[str, ...],
    renames: tuple[str, ...],
    **overrides: Any,
) -> LoaderOptions:
    values: dict[str, Any] = {
        "config": config_path if config_path else DISCOVER,
        "override_pattern": not extend,
        "camelize": not no_camelize,
        "maintain_scope": not flatten_scopes,
        "rename": _parse_rename(renames),
        **overrides,
    }
    if patterns:
        values["pattern"] = list(patterns)
    if replace_string is not None:
        values["replace_string"] = replace_string
    if scopes:
        values["scope"] = list(scopes)
    try:
        return LoaderOptions(**values)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """load-plugins: inspect the plugins a project would expose."""
    setup_logging("DEBUG" if verbose else None)


@main.command("list")
@_plugin_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_plugins(as_json: bool, **kwargs: Any) -> None:
    """Show every matched dependency and the key it is exposed under."""
    options = _build_options(**kwargs)
    try:
        entries = plan_plugins(options)
    except LoadPluginsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        rows = [{"key": e.display_key, "package": e.original_name} for e in entries]
        click.echo(json.dumps(rows, indent=2))
        return

    if not entries:
        click.echo("No plugins found.")
        return

    width = max(len(e.display_key) for e in entries)
    click.echo(f"Found {len(entries)} plugin(s)\n")
    for e in entries:
        click.echo(f"  {e.display_key.ljust(width)}  {e.original_name}")


@main.command("check")
@_plugin_options
@click.option("--debug", is_flag=True, help="Log each module as it is loaded")
def check(debug: bool, **kwargs: Any) -> None:
    """Import every matched plugin and report the ones that fail."""
    options = _build_options(debug=debug, **kwargs)
    try:
        entries = plan_plugins(options)
        plugins = load_plugins(options)
    except LoadPluginsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    failures = 0
    for e in entries:
        target = plugins
        try:
            for part in e.path:
                target = target[part]
        except ImportError as exc:
            failures += 1
            click.echo(f"  {e.display_key}: missing: {exc}")
        except Exception as exc:
            failures += 1
            click.echo(f"  {e.display_key}: failed: {type(exc).__name__}: {exc}")
        else:
            click.echo(f"  {e.display_key}: ok")

    if failures:
        click.echo(f"\n{failures} of {len(entries)} plugin(s) could not be loaded", err=True)
        sys.exit(1)
