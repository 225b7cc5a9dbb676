from __future__ import annotations

from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from valcore.expressions.bindings import BindingEnvironment


class ExpressionBackend(ABC):
    """Base class for expression backends

    A backend turns an expression text into a compiled form once, and
    evaluates the compiled form against any number of binding environments.
    Implementations must not keep any state that changes during
    :meth:`execute`, such that a backend and its compiled expressions can
    be used by concurrent evaluations.

    Backends report errors with any exception. The
    :class:`~valcore.expressions.ExpressionEvaluator` maps them onto the
    error taxonomy of :mod:`valcore.exceptions`.
    """

    @property
    @abstractmethod
    def language(self) -> str:
        """Language identifier of the expressions this backend evaluates"""

    @abstractmethod
    def compile(self, expression: str) -> Any:
        """Return a compiled form of ``expression``"""

    @abstractmethod
    def execute(self, compiled: Any, bindings: BindingEnvironment) -> Any:
        """Evaluate a compiled expression and return its raw result"""

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.language!r})'


class ScriptEngine(ABC):
    """Interface of a general-purpose expression or script runtime

    Script engines are registered with an
    :class:`~valcore.expressions.EngineRegistry` under one or more language
    identifiers, and are used via an :class:`ExternalEngineBackend`.
    """

    @abstractmethod
    def compile(self, source: str) -> Any:
        """Compile ``source``, or return it unchanged if unsupported"""

    @abstractmethod
    def eval(self, compiled: Any, bindings: Mapping[str, Any]) -> Any:
        """Evaluate a compiled expression with the given flat name bindings"""


class ExternalEngineBackend(ExpressionBackend):
    """Adapter of a registered :class:`ScriptEngine` to a backend"""

    def __init__(self, language: str, engine: ScriptEngine):
        self._language = language
        self._engine = engine

    @property
    def language(self) -> str:
        return self._language

    @property
    def engine(self) -> ScriptEngine:
        return self._engine

    def compile(self, expression: str) -> Any:
        return self._engine.compile(expression)

    def execute(self, compiled: Any, bindings: BindingEnvironment) -> Any:
        # a plain dict, engines may use it as a namespace and modify it
        return self._engine.eval(compiled, dict(bindings))
