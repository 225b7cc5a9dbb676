from __future__ import annotations

import threading
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
)

if TYPE_CHECKING:
    from valcore.expressions.bindings import BindingEnvironment
    from valcore.expressions.el.nodes import ParsedExpression

from valcore.consts import EMBEDDED_LANGUAGE
from valcore.exceptions import InvalidExpression
from valcore.expressions.backend import ExpressionBackend
from valcore.expressions.el.exceptions import ExpressionSyntaxError
from valcore.expressions.el.functions import (
    DEFAULT_FUNCTIONS,
    FunctionTable,
)
from valcore.expressions.el.interpreter import (
    EvaluationContext,
    evaluate_node,
)
from valcore.expressions.el.nodes import FunctionCall
from valcore.expressions.el.parser import parse
from valcore.expressions.el.resolvers import (
    DEFAULT_RESOLVER,
    Resolver,
)
from valcore.expressions.el.variables import (
    EMPTY_VARIABLES,
    VariableTable,
)


class EmbeddedInterpreterBackend(ExpressionBackend):
    """Backend for the embedded expression language

    The backend composes three independent lookup facilities: a
    :class:`~valcore.expressions.el.resolvers.Resolver` chain for names and
    properties, a :class:`FunctionTable`, and a :class:`VariableTable`.
    All of them are immutable. Use :meth:`with_function` and
    :meth:`with_variable` to obtain an extended backend.

    Function calls are checked against the function table when an
    expression is compiled. An unknown function is reported as
    :class:`~valcore.exceptions.InvalidExpression`.
    """

    def __init__(
        self,
        *,
        resolver: Resolver = DEFAULT_RESOLVER,
        functions: FunctionTable = DEFAULT_FUNCTIONS,
        variables: VariableTable = EMPTY_VARIABLES,
    ):
        self._resolver = resolver
        self._functions = functions
        self._variables = variables

    @property
    def language(self) -> str:
        return EMBEDDED_LANGUAGE

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    @property
    def functions(self) -> FunctionTable:
        return self._functions

    @property
    def variables(self) -> VariableTable:
        return self._variables

    def with_function(
        self,
        prefix: str,
        name: str,
        func: Callable,
    ) -> EmbeddedInterpreterBackend:
        return self.__class__(
            resolver=self._resolver,
            functions=self._functions.with_function(prefix, name, func),
            variables=self._variables,
        )

    def with_variable(self, name: str, expression: str) -> EmbeddedInterpreterBackend:
        return self.__class__(
            resolver=self._resolver,
            functions=self._functions,
            variables=self._variables.with_variable(name, expression),
        )

    def compile(self, expression: str) -> ParsedExpression:
        try:
            parsed = parse(expression)
        except ExpressionSyntaxError as e:
            raise InvalidExpression(expression, str(e)) from e
        for node in parsed.root.walk():
            if (
                isinstance(node, FunctionCall)
                and self._functions.resolve(node.prefix, node.name) is None
            ):
                raise InvalidExpression(
                    expression,
                    f'function {node.qualified_name!r} is not defined',
                )
        return parsed

    def execute(self, compiled: ParsedExpression, bindings: BindingEnvironment) -> Any:
        context = EvaluationContext(
            bindings=bindings,
            resolver=self._resolver,
            functions=self._functions,
            variables=self._variables,
        )
        return evaluate_node(compiled.root, context)


__the_backend: EmbeddedInterpreterBackend | None = None
__backend_lock = threading.Lock()


def get_embedded_backend() -> EmbeddedInterpreterBackend:
    """Return a process-unique backend with the default configuration"""
    global __the_backend  # noqa: PLW0603
    with __backend_lock:
        if __the_backend is None:
            __the_backend = EmbeddedInterpreterBackend()
    return __the_backend
