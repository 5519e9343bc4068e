"""Resolver — the entry point from a variable name to a VariableAccessor.

A resolver is bound to one environment mapping, conventionally
``os.environ``. It only ever reads from that mapping.

Resolving one variable and reading the whole mapping are separate
operations: :meth:`Resolver.get` and :meth:`Resolver.get_all`.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Mapping
from types import MappingProxyType

from envget.config.settings import EnvgetSettings
from envget.domain.accessor import VariableAccessor
from envget.domain.types import ValueSource

logger = logging.getLogger(__name__)


class Resolver:
    """Look up variables in a read-only mapping and wrap them in accessors.

    Usage::

        env = Resolver(os.environ)
        port = env.get("PORT", "8080").as_int()
        token = env("API_TOKEN").required().as_string()

    Args:
        env: The environment mapping. Never mutated.
        empty_is_missing: Treat a present-but-empty value as unset, so the
            fallback applies and ``required()`` fails. By default an empty
            string is a set value.
    """

    def __init__(self, env: Mapping[str, str], *, empty_is_missing: bool = False) -> None:
        self._env = env
        self._empty_is_missing = empty_is_missing

    def get_all(self) -> Mapping[str, str]:
        """Return a read-only snapshot of the full mapping."""
        return MappingProxyType(dict(self._env))

    def get(self, name: str, fallback: str | None = None) -> VariableAccessor:
        """Resolve *name* to an accessor.

        When *name* is not in the mapping, the accessor's raw value is
        *fallback* if given, else None. A fallback is indistinguishable
        from a real value for every coercion that follows.
        """
        raw = self._env.get(name)
        if raw == "" and self._empty_is_missing:
            raw = None

        if raw is not None:
            source = ValueSource.ENVIRONMENT
        elif fallback is not None:
            raw = fallback
            source = ValueSource.FALLBACK
        else:
            source = ValueSource.ABSENT

        logger.debug("Resolved %s from %s", name, source)
        return VariableAccessor(name=name, raw_value=raw, source=source)

    __call__ = get


def from_environ(settings: EnvgetSettings | None = None) -> Resolver:
    """Build a resolver over the live process environment.

    *settings* defaults to :class:`EnvgetSettings` read from ``ENVGET_*``.
    """
    if settings is None:
        settings = EnvgetSettings()
    return Resolver(os.environ, empty_is_missing=settings.empty_is_missing)


@functools.cache
def _default() -> Resolver:
    """Process-wide resolver behind :func:`get` and :func:`get_all`.

    ``ENVGET_*`` settings are read once, on first use; variable values are
    still looked up in the live ``os.environ`` on every call.
    """
    return from_environ()


def get(name: str, fallback: str | None = None) -> VariableAccessor:
    """Resolve *name* from ``os.environ``."""
    return _default().get(name, fallback)


def get_all() -> Mapping[str, str]:
    """Read-only snapshot of ``os.environ``."""
    return _default().get_all()
