"""Entry points — plan and load the plugins declared by a project."""

from __future__ import annotations

from typing import Any

from load_plugins.assembler import PluginNamespace, assemble
from load_plugins.collisions import CollisionDetector
from load_plugins.core.logging import get_debug_logger
from load_plugins.manifest import collect_dependencies, resolve_config
from load_plugins.matcher import build_patterns, match_names
from load_plugins.models import ResolutionEntry
from load_plugins.options import LoaderOptions
from load_plugins.resolver import ModuleResolver
from load_plugins.transformer import NameTransformer


def plan_plugins(options: LoaderOptions) -> list[ResolutionEntry]:
    """Match, rename and collision-check the declared dependencies.

    Nothing is loaded. Raises before returning if any two dependencies
    share a key, so callers never see a partial plan.
    """
    manifest = resolve_config(options.config, options.cwd)
    dependencies = collect_dependencies(manifest, options.scope)
    patterns = build_patterns(options.pattern, options.override_pattern)
    names = match_names(dependencies, patterns)

    transformer = NameTransformer(
        replace_string=options.replace_string,
        camelize=options.camelize,
        maintain_scope=options.maintain_scope,
        rename=options.rename,
        rename_fn=options.rename_fn,
    )
    detector = CollisionDetector()
    entries: list[ResolutionEntry] = []
    for name in names:
        entry = transformer.transform(name)
        detector.check(entry)
        entries.append(entry)
    return entries


def load_plugins(options: LoaderOptions | None = None, **kwargs: Any) -> PluginNamespace:
    """Expose every matching dependency on a :class:`PluginNamespace`.

    Accepts a prepared :class:`LoaderOptions` or the same options as keyword
    arguments. With ``lazy=True`` (the default) modules are imported on first
    access; otherwise they are all imported before this returns.
    """
    if options is None:
        options = LoaderOptions(**kwargs)
    elif kwargs:
        raise TypeError("pass either a LoaderOptions instance or keyword options, not both")

    entries = plan_plugins(options)
    resolver = ModuleResolver(
        require_fn=options.require_fn,
        transforms=options.post_require_transforms,
        logger=get_debug_logger(options.debug),
    )
    return assemble((entry, resolver.resolve(entry, lazy=options.lazy)) for entry in entries)
