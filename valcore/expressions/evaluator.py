"""Preparation and evaluation of boolean expressions

Evaluating an expression happens in two steps. :func:`prepare` selects a
backend for the declared language, and compiles the expression once. All
errors that can be detected without a value to evaluate are raised here.
:func:`evaluate` then binds the value(s) of a single validation to the
declared names, runs the compiled expression, and reduces the result to a
boolean.

:class:`ExpressionEvaluator` wraps both steps for a single constraint
instance, and guarantees that preparation is attempted exactly once.

There is no evaluation budget. An expression that does not terminate
(e.g., due to a recursive variable definition, or a custom function that
never returns) blocks the calling thread. Guarding against this is left to
the caller.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from valcore.expressions.el.backend import EmbeddedInterpreterBackend
    from valcore.expressions.registry import EngineRegistry

from valcore.consts import EMBEDDED_LANGUAGE
from valcore.exceptions import (
    BackendFailure,
    ConstraintDeclarationError,
    EmbeddedRuntimeUnavailable,
    EngineNotFound,
    EvaluationError,
    InvalidExpression,
    NullResult,
    PreparationError,
    TypeMismatch,
)
from valcore.expressions.backend import (
    ExpressionBackend,
    ExternalEngineBackend,
)
from valcore.expressions.bindings import BindingEnvironment
from valcore.expressions.capabilities import Capabilities
from valcore.expressions.el.backend import get_embedded_backend
from valcore.expressions.registry import get_registry

lgr = logging.getLogger('valcore.expressions')


@dataclass(frozen=True)
class ExpressionSpec:
    """Declaration of an expression and the names it can refer to"""

    expression: str
    binding_names: tuple[str, ...]
    """One name to bind a single object, or one name per positional
    parameter"""
    language: str = EMBEDDED_LANGUAGE

    def __post_init__(self):
        if isinstance(self.binding_names, str):
            object.__setattr__(self, 'binding_names', (self.binding_names,))
        else:
            object.__setattr__(self, 'binding_names', tuple(self.binding_names))
        if not self.binding_names:
            msg = 'at least one binding name is required'
            raise ConstraintDeclarationError(msg)
        if len(set(self.binding_names)) != len(self.binding_names):
            msg = f'duplicate binding names in {self.binding_names!r}'
            raise ConstraintDeclarationError(msg)


@dataclass(frozen=True)
class PreparedExpression:
    """An expression compiled by the backend it was resolved to"""

    spec: ExpressionSpec
    backend: ExpressionBackend
    compiled: Any


def prepare(
    spec: ExpressionSpec,
    *,
    capabilities: Capabilities | None = None,
    registry: EngineRegistry | None = None,
    embedded_backend: EmbeddedInterpreterBackend | None = None,
) -> PreparedExpression:
    """Resolve the backend for an expression and compile it

    Parameters
    ----------
    spec: ExpressionSpec
      The expression to prepare.
    capabilities: Capabilities, optional
      Consulted when the embedded language is requested. By default,
      capabilities are determined from configuration.
    registry: EngineRegistry, optional
      Registry to look up any other language in. By default, the
      process-wide registry is used.
    embedded_backend: EmbeddedInterpreterBackend, optional
      Backend to use for the embedded language, e.g. one with additional
      functions. By default, a backend with the default function table
      is used.

    Raises
    ------
    EmbeddedRuntimeUnavailable
      The embedded language is requested, but disabled.
    EngineNotFound
      No engine is registered for the requested language.
    InvalidExpression
      The backend failed to compile the expression.
    """
    backend: ExpressionBackend
    if spec.language == EMBEDDED_LANGUAGE:
        caps = capabilities or Capabilities.from_config()
        if not caps.embedded_interpreter:
            raise EmbeddedRuntimeUnavailable
        backend = embedded_backend or get_embedded_backend()
    else:
        engine = (registry or get_registry()).lookup(spec.language)
        if engine is None:
            raise EngineNotFound(spec.language)
        backend = ExternalEngineBackend(spec.language, engine)

    try:
        compiled = backend.compile(spec.expression)
    except PreparationError:
        raise
    except Exception as e:
        raise InvalidExpression(spec.expression, str(e)) from e
    lgr.debug('Prepared %r expression %r', spec.language, spec.expression)
    return PreparedExpression(spec=spec, backend=backend, compiled=compiled)


def evaluate(prepared: PreparedExpression, values: Sequence[Any]) -> bool:
    """Evaluate a prepared expression with positional values

    ``values[i]`` is bound to ``prepared.spec.binding_names[i]``.

    Raises
    ------
    ArityMismatch
      The number of values does not match the number of binding names.
    NullResult
      The expression evaluated to ``None``.
    TypeMismatch
      The expression evaluated to something other than a ``bool``.
    ReadOnlyAssignment
      The expression attempted to assign a value.
    BackendFailure
      The backend reported any other error during evaluation.
    """
    spec = prepared.spec
    bindings = BindingEnvironment.for_parameters(spec.binding_names, values)
    try:
        result = prepared.backend.execute(prepared.compiled, bindings)
    except EvaluationError:
        raise
    except Exception as e:
        raise BackendFailure(spec.language, spec.expression) from e
    if result is None:
        raise NullResult(spec.expression)
    if not isinstance(result, bool):
        raise TypeMismatch(spec.expression, type(result).__name__)
    return result


class EvaluatorState(Enum):
    """Enumeration of the preparation states of an :class:`ExpressionEvaluator`
    """

    unprepared = 'unprepared'
    preparing = 'preparing'
    ready = 'ready'
    failed = 'failed'


class ExpressionEvaluator:
    """Evaluator of a single expression declaration

    The expression is prepared on first use, or on an explicit call to
    :meth:`prepare`. Preparation is attempted exactly once, also with
    concurrent callers. If it fails, the evaluator is permanently unusable,
    and any subsequent call raises the same
    :class:`~valcore.exceptions.PreparationError`, without retrying.

    Once prepared, an evaluator can be used by any number of threads
    concurrently.
    """

    def __init__(
        self,
        spec: ExpressionSpec,
        *,
        capabilities: Capabilities | None = None,
        registry: EngineRegistry | None = None,
        embedded_backend: EmbeddedInterpreterBackend | None = None,
    ):
        self._spec = spec
        self._prepare_kwargs = {
            'capabilities': capabilities,
            'registry': registry,
            'embedded_backend': embedded_backend,
        }
        self._lock = threading.Lock()
        self._state = EvaluatorState.unprepared
        self._prepared: PreparedExpression | None = None
        self._error: PreparationError | None = None

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._spec!r})'

    @property
    def spec(self) -> ExpressionSpec:
        return self._spec

    @property
    def state(self) -> EvaluatorState:
        return self._state

    def prepare(self) -> PreparedExpression:
        """Return the prepared expression, preparing it if needed"""
        if self._state is EvaluatorState.ready:
            return self._prepared  # type: ignore[return-value]
        with self._lock:
            if self._state is EvaluatorState.unprepared:
                self._state = EvaluatorState.preparing
                try:
                    self._prepared = prepare(self._spec, **self._prepare_kwargs)
                except PreparationError as e:
                    lgr.debug('Failed to prepare %r: %s', self._spec, e)
                    self._error = e
                    self._state = EvaluatorState.failed
                except BaseException:
                    # not a verdict on the declaration, may be retried
                    self._state = EvaluatorState.unprepared
                    raise
                else:
                    self._state = EvaluatorState.ready
        if self._state is EvaluatorState.failed:
            raise self._error  # type: ignore[misc]
        return self._prepared  # type: ignore[return-value]

    def evaluate(self, values: Sequence[Any]) -> bool:
        """Evaluate the expression with one value per binding name"""
        return evaluate(self.prepare(), values)

    def evaluate_object(self, value: Any) -> bool:
        """Evaluate the expression with ``value`` as the only binding"""
        return evaluate(self.prepare(), (value,))
