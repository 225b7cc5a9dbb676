"""Restricted Python expression engine

Expressions are Python expressions (not statements), checked against an
allow-list of syntax nodes before they are compiled. Access to any name or
attribute starting with an underscore is rejected, as are the string
formatting methods ``format`` and ``format_map``. Only a small set of
side-effect free builtins is available. Bound values are exposed as plain
names::

  value is not None and len(value) > 3

The checks prevent obvious abuse, but this is not a sandbox for
untrusted input. Method calls on bound values are permitted and execute
arbitrary code of those objects.
"""

from __future__ import annotations

import ast
from types import (
    CodeType,
    MappingProxyType,
)
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

from valcore.expressions.backend import ScriptEngine

ALLOWED_NODES = (
    ast.Expression,
    ast.BoolOp,
    ast.BinOp,
    ast.UnaryOp,
    ast.Compare,
    ast.IfExp,
    ast.Call,
    ast.keyword,
    ast.Attribute,
    ast.Subscript,
    ast.Slice,
    ast.Name,
    ast.Load,
    ast.Constant,
    ast.Tuple,
    ast.List,
    ast.And,
    ast.Or,
    ast.Not,
    ast.Add,
    ast.Sub,
    ast.Mult,
    ast.Div,
    ast.FloorDiv,
    ast.Mod,
    ast.Pow,
    ast.USub,
    ast.UAdd,
    ast.Eq,
    ast.NotEq,
    ast.Gt,
    ast.GtE,
    ast.Lt,
    ast.LtE,
    ast.In,
    ast.NotIn,
    ast.Is,
    ast.IsNot,
)

SAFE_BUILTINS: Mapping[str, Any] = MappingProxyType(
    {
        'abs': abs,
        'all': all,
        'any': any,
        'bool': bool,
        'float': float,
        'int': int,
        'len': len,
        'max': max,
        'min': min,
        'round': round,
        'sorted': sorted,
        'str': str,
        'sum': sum,
    }
)


class UnsafeExpressionError(ValueError):
    """Raised when an expression uses syntax outside the allow-list"""


# format fields can reach underscore attributes, e.g. '{0.__class__}'
FORBIDDEN_ATTRIBUTES = frozenset(('format', 'format_map'))


def validate_ast(tree: ast.AST) -> None:
    for node in ast.walk(tree):
        if not isinstance(node, ALLOWED_NODES):
            msg = f'unsupported expression node: {type(node).__name__}'
            raise UnsafeExpressionError(msg)
        if isinstance(node, ast.Attribute) and (
            node.attr.startswith('_') or node.attr in FORBIDDEN_ATTRIBUTES
        ):
            msg = f'access to attribute {node.attr!r} is not permitted'
            raise UnsafeExpressionError(msg)
        if isinstance(node, ast.Name) and node.id.startswith('_'):
            msg = f'access to name {node.id!r} is not permitted'
            raise UnsafeExpressionError(msg)


class PythonScriptEngine(ScriptEngine):
    """:class:`ScriptEngine` for restricted Python expressions"""

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'

    def compile(self, source: str) -> CodeType:
        tree = ast.parse(source.strip(), mode='eval')
        validate_ast(tree)
        return compile(tree, '<valcore-expression>', 'eval')

    def eval(self, compiled: CodeType, bindings: Mapping[str, Any]) -> Any:
        return eval(  # noqa: S307
            compiled,
            {'__builtins__': dict(SAFE_BUILTINS)},
            dict(bindings),
        )
