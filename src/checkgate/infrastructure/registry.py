"""
Resource loader lookup by name.

Loaders are discovered from the ``checkgate.loaders`` entry point group, so
a deployment can pick its network stack from configuration:

    [project.entry-points."checkgate.loaders"]
    S3ResourceLoader = "mypackage.loaders:S3ResourceLoader"

Loaders that declare a ``config_class`` dataclass get their options split
into a typed config object and plain constructor arguments.
"""

import dataclasses
import logging
from importlib.metadata import entry_points
from typing import Any

from checkgate.domain.interfaces import ResourceLoaderInterface

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "checkgate.loaders"


class LoaderRegistry:
    """
    Name -> ResourceLoaderInterface class table.

    Entry points are read once, on the first lookup. Manual registrations
    take precedence over discovered ones with the same name.

    Example usage:
        loader = LoaderRegistry.create("HttpResourceLoader", timeout=5.0)
        barrier = Barrier(on_done, timeout=10.0, loader=loader)
    """

    _loaders: dict[str, type[ResourceLoaderInterface]] = {}
    _discovered: bool = False

    @classmethod
    def _discover(cls) -> None:
        if cls._discovered:
            return
        cls._discovered = True

        for ep in entry_points(group=ENTRY_POINT_GROUP):
            if ep.name in cls._loaders:
                continue
            try:
                cls._loaders[ep.name] = ep.load()
            except (ImportError, AttributeError) as e:
                logger.warning("Skipping resource loader %r: %s", ep.name, e)

    @classmethod
    def register(cls, name: str, loader_class: type[ResourceLoaderInterface]) -> None:
        """Add or replace a loader under name."""
        cls._loaders[name] = loader_class

    @classmethod
    def get(cls, name: str) -> type[ResourceLoaderInterface]:
        """
        Look up a loader class.

        Raises:
            KeyError: If no loader is registered under name
        """
        cls._discover()
        try:
            return cls._loaders[name]
        except KeyError:
            available = ", ".join(cls._loaders) or "(none)"
            raise KeyError(
                f"Loader '{name}' not found. Available loaders: {available}"
            ) from None

    @classmethod
    def create(cls, name: str, **options: Any) -> ResourceLoaderInterface:
        """
        Instantiate a loader by name.

        Options naming a field of the loader's ``config_class`` are collected
        into one config object; the rest (transport, scheduler, ...) go to
        the constructor unchanged. An explicit ``config=`` is passed through.

        Raises:
            KeyError: If the loader is unknown
            TypeError: If an option matches neither the config nor the constructor
        """
        loader_class = cls.get(name)
        config_class = getattr(loader_class, "config_class", None)
        if config_class is None or "config" in options:
            return loader_class(**options)

        field_names = {f.name for f in dataclasses.fields(config_class)}
        config_options = {k: v for k, v in options.items() if k in field_names}
        ctor_options = {k: v for k, v in options.items() if k not in field_names}
        return loader_class(config=config_class(**config_options), **ctor_options)

    @classmethod
    def available(cls) -> list[str]:
        """Names of every known loader."""
        cls._discover()
        return list(cls._loaders)

    @classmethod
    def clear(cls) -> None:
        """Forget all loaders and allow entry points to be read again."""
        cls._loaders.clear()
        cls._discovered = False
