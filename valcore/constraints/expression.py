"""Constraints defined by boolean expressions"""

from __future__ import annotations

from collections.abc import Sequence
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from valcore.expressions import (
        Capabilities,
        EngineRegistry,
    )
    from valcore.expressions.el import EmbeddedInterpreterBackend

from valcore.config import get_manager
from valcore.constraints.constraint import Constraint
from valcore.expressions import (
    ExpressionEvaluator,
    ExpressionSpec,
)


class _ExpressionConstraint(Constraint):
    """Common setup of expression-based constraints

    The expression is prepared on construction, hence a declaration that
    can never work raises a :class:`~valcore.exceptions.PreparationError`
    immediately, and not on first use.
    """

    def __init__(
        self,
        expression: str,
        binding_names: str | Sequence[str],
        *,
        language: str | None,
        capabilities: Capabilities | None,
        registry: EngineRegistry | None,
        embedded_backend: EmbeddedInterpreterBackend | None,
    ):
        super().__init__()
        if language is None:
            language = get_manager().get('valcore.expression.language').value
        self._evaluator = ExpressionEvaluator(
            ExpressionSpec(
                expression=expression,
                binding_names=binding_names,  # type: ignore[arg-type]
                language=language,  # type: ignore[arg-type]
            ),
            capabilities=capabilities,
            registry=registry,
            embedded_backend=embedded_backend,
        )
        self._evaluator.prepare()

    @property
    def expression(self) -> str:
        return self._evaluator.spec.expression

    @property
    def language(self) -> str:
        return self._evaluator.spec.language

    def __repr__(self) -> str:
        spec = self._evaluator.spec
        return (
            f'{self.__class__.__name__}({spec.expression!r}, '
            f'{spec.binding_names!r}, language={spec.language!r})'
        )

    @property
    def input_synopsis(self):
        return f'value satisfying {self.expression}'

    def _raise_unsatisfied(self, value: Any) -> None:
        self.raise_for(
            value,
            'does not satisfy {expression}',
            expression=self.expression,
            language=self.language,
        )


class EnsureExpression(_ExpressionConstraint):
    """Ensure a value satisfies a boolean expression

    The value is bound under the name ``alias`` (default: ``value``)::

      >>> c = EnsureExpression('value != null && fn:length(value) > 3')
      >>> c('hello')
      'hello'

    The expression language defaults to the one configured as
    ``valcore.expression.language``.

    Only an expression that evaluates to ``False`` is a violation of the
    constraint. Any problem with the evaluation itself raises an
    :class:`~valcore.exceptions.EvaluationError`.
    """

    def __init__(
        self,
        expression: str,
        *,
        alias: str = 'value',
        language: str | None = None,
        capabilities: Capabilities | None = None,
        registry: EngineRegistry | None = None,
        embedded_backend: EmbeddedInterpreterBackend | None = None,
    ):
        super().__init__(
            expression,
            alias,
            language=language,
            capabilities=capabilities,
            registry=registry,
            embedded_backend=embedded_backend,
        )

    @property
    def alias(self) -> str:
        return self._evaluator.spec.binding_names[0]

    def __call__(self, value: Any) -> Any:
        if not self._evaluator.evaluate_object(value):
            self._raise_unsatisfied(value)
        return value


class EnsureParamsExpression(_ExpressionConstraint):
    """Ensure a sequence of parameter values satisfies a boolean expression

    The i-th value is bound to the i-th name in ``aliases``. The number
    of values must match the number of aliases, or
    :class:`~valcore.exceptions.ArityMismatch` is raised.
    """

    def __init__(
        self,
        expression: str,
        aliases: Sequence[str],
        *,
        language: str | None = None,
        capabilities: Capabilities | None = None,
        registry: EngineRegistry | None = None,
        embedded_backend: EmbeddedInterpreterBackend | None = None,
    ):
        super().__init__(
            expression,
            aliases,
            language=language,
            capabilities=capabilities,
            registry=registry,
            embedded_backend=embedded_backend,
        )

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._evaluator.spec.binding_names

    @property
    def input_synopsis(self):
        return f'({", ".join(self.aliases)}) satisfying {self.expression}'

    def __call__(self, value: Sequence[Any]) -> Sequence[Any]:
        if not isinstance(value, Sequence) or isinstance(value, str):
            self.raise_for(
                value,
                'is not a sequence of parameter values, but {type}',
                type=type(value).__name__,
            )
        if not self._evaluator.evaluate(value):
            self._raise_unsatisfied(value)
        return value
