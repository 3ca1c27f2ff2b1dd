"""Custom exceptions for load-plugins."""


class LoadPluginsError(Exception):
    """Base exception for all load-plugins errors."""


class ConfigNotFoundError(LoadPluginsError):
    """Raised when no dependency manifest is available."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Could not find dependencies. Do you have a package.json file in your project?"
        )


class ManifestError(LoadPluginsError):
    """Raised when a manifest cannot be read or has an unexpected shape."""


class KeyCollisionError(LoadPluginsError):
    """Raised when two dependencies resolve to the same property key."""

    def __init__(self, key: str, name: str, existing: str, cross_scope: bool = False):
        self.key = key
        self.name = name
        self.existing = existing
        self.cross_scope = cross_scope
        if cross_scope:
            hint = "you may have repeated a dependency in another scope like"
        else:
            hint = "you may have repeated dependencies in your package.json like"
        super().__init__(f'Could not define the property "{key}", {hint} "{name}" and "{existing}"')


class InvalidKeyError(LoadPluginsError):
    """Raised when a dependency name transforms into an unusable key."""

    def __init__(self, name: str, key: object):
        self.name = name
        self.key = key
        super().__init__(
            f"Dependency {name!r} produced an invalid property key {key!r}; "
            "check replaceString, rename and renameFn"
        )
