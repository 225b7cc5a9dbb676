from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from valcore.expressions.backend import ScriptEngine

from valcore.consts import PYTHON_LANGUAGE
from valcore.expressions.python_engine import PythonScriptEngine

lgr = logging.getLogger('valcore.expressions')


class EngineRegistry:
    """Registry of script engines by language identifier

    Lookups never raise, an unknown language identifier yields ``None``.

    Registration replaces the internal mapping as a whole, instead of
    modifying it. Lookups are therefore safe while engines are registered
    concurrently. Expressions that were prepared before a registration keep
    using the engine they were prepared with.
    """

    # serializes registrations, lookups need no lock
    _lock = threading.Lock()

    def __init__(self, engines: Mapping[str, ScriptEngine] | None = None):
        self._engines: Mapping[str, ScriptEngine] = MappingProxyType(
            dict(engines or {})
        )

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({sorted(self._engines)!r})'

    def __contains__(self, language: str) -> bool:
        return language in self._engines

    @property
    def languages(self) -> tuple[str, ...]:
        """Identifiers of all registered languages"""
        return tuple(self._engines)

    def lookup(self, language: str) -> ScriptEngine | None:
        """Return the engine registered for ``language``, or ``None``"""
        return self._engines.get(language)

    def register(self, engine: ScriptEngine, *languages: str) -> None:
        """Register ``engine`` for all given language identifiers

        An engine already registered for any of the identifiers is
        replaced.
        """
        if not languages:
            msg = 'at least one language identifier is required'
            raise ValueError(msg)
        with self._lock:
            engines = dict(self._engines)
            for lang in languages:
                if lang in engines:
                    lgr.debug('Replacing %r engine %r', lang, engines[lang])
                engines[lang] = engine
            self._engines = MappingProxyType(engines)


__the_registry: EngineRegistry | None = None
__registry_lock = threading.Lock()


def get_registry() -> EngineRegistry:
    """Return a process-unique :class:`EngineRegistry` instance

    On first access, the registry is created with the restricted Python
    expression engine registered as ``'python'``.
    """
    global __the_registry  # noqa: PLW0603
    with __registry_lock:
        if __the_registry is None:
            registry = EngineRegistry()
            registry.register(PythonScriptEngine(), PYTHON_LANGUAGE)
            __the_registry = registry
    return __the_registry
