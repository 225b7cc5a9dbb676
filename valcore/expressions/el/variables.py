from __future__ import annotations

from collections.abc import (
    Iterator,
    Mapping,
)
from types import MappingProxyType

from valcore.exceptions import InvalidExpression
from valcore.expressions.el.exceptions import ExpressionSyntaxError
from valcore.expressions.el.nodes import Node
from valcore.expressions.el.parser import parse


class VariableTable(Mapping):
    """Immutable mapping of variable names to parsed expressions

    When an expression refers to a bare identifier, the variable table is
    consulted before the bindings. A variable is itself an expression, which
    is evaluated in the context of the referring expression every time
    the variable is used.

    The default table is empty. Like :class:`FunctionTable`, a variable table
    is extended by copy with :meth:`with_variable`.
    """

    def __init__(self, variables: Mapping[str, Node] | None = None):
        self._variables = MappingProxyType(dict(variables or {}))

    def __getitem__(self, key: str) -> Node:
        return self._variables[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({sorted(self._variables)!r})'

    def resolve(self, name: str) -> Node | None:
        return self._variables.get(name)

    def with_variable(self, name: str, expression: str) -> VariableTable:
        """Return a new table with ``name`` defined as ``expression``

        Raises :class:`~valcore.exceptions.InvalidExpression` if the
        expression cannot be parsed.
        """
        try:
            parsed = parse(expression)
        except ExpressionSyntaxError as e:
            raise InvalidExpression(expression, str(e)) from e
        return self.__class__({**self._variables, name: parsed.root})


EMPTY_VARIABLES = VariableTable()
