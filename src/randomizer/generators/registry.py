"""Generator registry: a memoizing, thread-safe factory keyed by kind.

Built-in handle classes register themselves at import time via the
``@register_generator`` decorator. A :class:`GeneratorRegistry` instance
constructs each kind's handle on first request and returns the same
instance afterwards, until :meth:`GeneratorRegistry.reset` drops it.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, ClassVar

from randomizer.config import RandomizerConfig
from randomizer.exceptions import UnknownGeneratorKindError
from randomizer.kinds import GeneratorKind, parse_generator_kind

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from randomizer.generators.base import Generator

    GeneratorFactory = Callable[[RandomizerConfig], Generator]

logger = logging.getLogger("randomizer")


class GeneratorRegistry:
    """Maps a :class:`GeneratorKind` to a live, cached generator handle.

    Construction is guarded by a lock: when several threads request the same
    uncached kind at once, exactly one handle is built and all of them
    receive it.

    Args:
        config: Configuration handed to every factory. Defaults to
            ``RandomizerConfig()``.
        factories: Per-instance overrides of the registered factories.
    """

    _factories: ClassVar[dict[GeneratorKind, GeneratorFactory]] = {}

    @classmethod
    def register(cls, kind: GeneratorKind) -> Callable[[type[Generator]], type[Generator]]:
        """Decorator that registers a handle class as the factory for *kind*.

        Args:
            kind: The kind the class implements.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *kind* is already registered.
        """

        def decorator(klass: type[Generator]) -> type[Generator]:
            if kind in cls._factories:
                raise ValueError(f"Generator kind '{kind.label}' is already registered")
            cls._factories[kind] = klass
            return klass

        return decorator

    def __init__(
        self,
        config: RandomizerConfig | None = None,
        factories: Mapping[GeneratorKind, GeneratorFactory] | None = None,
    ) -> None:
        self._config = config if config is not None else RandomizerConfig()
        self._builders: dict[GeneratorKind, GeneratorFactory] = dict(type(self)._factories)
        if factories:
            self._builders.update(factories)
        self._instances: dict[GeneratorKind, Generator] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> RandomizerConfig:
        return self._config

    def get(self, kind: GeneratorKind | str | int | None = None) -> Generator:
        """Return the cached handle for *kind*, constructing it on first use.

        Args:
            kind: Kind, label or ordinal. ``None`` selects
                ``config.default_kind``.

        Returns:
            The same handle instance on every call until :meth:`reset`.

        Raises:
            UnknownGeneratorKindError: If *kind* does not name a known kind.
        """
        resolved = self._resolve(kind)
        handle = self._instances.get(resolved)
        if handle is not None:
            return handle

        with self._lock:
            handle = self._instances.get(resolved)
            if handle is None:
                handle = self._construct(resolved)
                self._instances[resolved] = handle
        return handle

    def create(self, kind: GeneratorKind | str | int | None = None) -> Generator:
        """Return a fresh handle for *kind* without touching the cache."""
        return self._construct(self._resolve(kind))

    def reset(self, kind: GeneratorKind | str | int | None = None) -> None:
        """Drop the cached handle for *kind*, or every cached handle.

        The next :meth:`get` for a dropped kind constructs a new handle.
        """
        with self._lock:
            if kind is None:
                self._instances.clear()
                logger.debug("Reset all cached generators")
                return
            resolved = self._resolve(kind)
            if self._instances.pop(resolved, None) is not None:
                logger.debug("Reset cached %s generator", resolved.label)

    def is_cached(self, kind: GeneratorKind | str | int) -> bool:
        return self._resolve(kind) in self._instances

    def health_check(self) -> dict[str, Any]:
        """Return the status of every cached handle.

        Returns:
            Dictionary with the default kind and a ``'cached'`` mapping from
            kind label to handle status.
        """
        with self._lock:
            cached = dict(self._instances)
        return {
            "default_kind": self._config.default_kind,
            "cached": {kind.label: handle.health_check() for kind, handle in cached.items()},
        }

    def _resolve(self, kind: GeneratorKind | str | int | None) -> GeneratorKind:
        if kind is None:
            return parse_generator_kind(self._config.default_kind)
        return parse_generator_kind(kind)

    def _construct(self, kind: GeneratorKind) -> Generator:
        factory = self._builders.get(kind)
        if factory is None:
            available = sorted(k.label for k in self._builders)
            raise UnknownGeneratorKindError(kind.label, available)
        handle = factory(self._config)
        logger.debug("Constructed %s generator (source=%s)", kind.label, handle.source.name)
        return handle


# Convenience alias used as a decorator in generator modules.
register_generator = GeneratorRegistry.register
