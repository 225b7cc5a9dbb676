"""Evaluation of parsed expressions"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from valcore.expressions.bindings import BindingEnvironment
    from valcore.expressions.el.functions import FunctionTable
    from valcore.expressions.el.resolvers import Resolver
    from valcore.expressions.el.variables import VariableTable

from valcore.consts import UnsetValue
from valcore.expressions.el.coercion import (
    arithmetic,
    compare,
    equals,
    is_empty,
    to_boolean,
    to_number,
)
from valcore.expressions.el.exceptions import (
    FunctionNotFound,
    MethodNotFound,
    PropertyNotFound,
)
from valcore.expressions.el.nodes import (
    Assign,
    Binary,
    Conditional,
    FunctionCall,
    Identifier,
    Index,
    Literal,
    Member,
    MethodCall,
    Node,
    Unary,
)


@dataclass(frozen=True)
class EvaluationContext:
    """Everything an expression can refer to during a single evaluation

    The three lookup facilities are independent of each other: names are
    first looked up in ``variables``, and then via the ``resolver`` chain
    (which includes the ``bindings``). Function calls are looked up in
    ``functions``.
    """

    bindings: BindingEnvironment
    resolver: Resolver
    functions: FunctionTable
    variables: VariableTable


def evaluate_node(node: Node, context: EvaluationContext) -> Any:
    """Evaluate a syntax tree and return its (raw) value"""
    return _dispatch[type(node)](node, context)


def _literal(node: Literal, context: EvaluationContext) -> Any:  # noqa: ARG001
    return node.value


def _identifier(node: Identifier, context: EvaluationContext) -> Any:
    variable = context.variables.resolve(node.name)
    if variable is not None:
        return evaluate_node(variable, context)
    value = context.resolver.get_value(context, None, node.name)
    if value is UnsetValue:
        msg = f'cannot resolve identifier {node.name!r}'
        raise PropertyNotFound(msg)
    return value


def _property(context: EvaluationContext, base: Any, prop: Any) -> Any:
    # property access on null is null
    if base is None:
        return None
    value = context.resolver.get_value(context, base, prop)
    if value is UnsetValue:
        msg = f'property {prop!r} not found on type {type(base).__name__}'
        raise PropertyNotFound(msg)
    return value


def _member(node: Member, context: EvaluationContext) -> Any:
    return _property(context, evaluate_node(node.base, context), node.name)


def _index(node: Index, context: EvaluationContext) -> Any:
    base = evaluate_node(node.base, context)
    return _property(context, base, evaluate_node(node.index, context))


def _method_call(node: MethodCall, context: EvaluationContext) -> Any:
    base = evaluate_node(node.base, context)
    if base is None:
        msg = f'cannot invoke method {node.name!r} on null'
        raise MethodNotFound(msg)
    args = tuple(evaluate_node(a, context) for a in node.args)
    value = context.resolver.invoke(context, base, node.name, args)
    if value is UnsetValue:
        msg = f'method {node.name!r} not found on type {type(base).__name__}'
        raise MethodNotFound(msg)
    return value


def _function_call(node: FunctionCall, context: EvaluationContext) -> Any:
    func = context.functions.resolve(node.prefix, node.name)
    if func is None:
        msg = f'function {node.qualified_name!r} is not defined'
        raise FunctionNotFound(msg)
    return func(*(evaluate_node(a, context) for a in node.args))


def _unary(node: Unary, context: EvaluationContext) -> Any:
    value = evaluate_node(node.operand, context)
    if node.op == 'empty':
        return is_empty(value)
    if node.op == '!':
        return not to_boolean(value)
    return -to_number(value)


def _binary(node: Binary, context: EvaluationContext) -> Any:
    op = node.op
    left = evaluate_node(node.left, context)
    # logical operators short-circuit
    if op == '&&':
        return to_boolean(left) and to_boolean(evaluate_node(node.right, context))
    if op == '||':
        return to_boolean(left) or to_boolean(evaluate_node(node.right, context))
    right = evaluate_node(node.right, context)
    if op == '==':
        return equals(left, right)
    if op == '!=':
        return not equals(left, right)
    if op in ('<', '>', '<=', '>='):
        return compare(op, left, right)
    return arithmetic(op, left, right)


def _conditional(node: Conditional, context: EvaluationContext) -> Any:
    if to_boolean(evaluate_node(node.test, context)):
        return evaluate_node(node.then, context)
    return evaluate_node(node.otherwise, context)


def _assign(node: Assign, context: EvaluationContext) -> Any:
    target = node.target
    if isinstance(target, Identifier):
        base, prop = None, target.name
    elif isinstance(target, Member):
        base, prop = evaluate_node(target.base, context), target.name
    elif isinstance(target, Index):
        base = evaluate_node(target.base, context)
        prop = evaluate_node(target.index, context)
    else:
        msg = 'invalid assignment target'
        raise PropertyNotFound(msg)
    # always raises, nothing is writable
    context.resolver.set_value(context, base, prop, evaluate_node(node.value, context))


_dispatch = {
    Literal: _literal,
    Identifier: _identifier,
    Member: _member,
    Index: _index,
    MethodCall: _method_call,
    FunctionCall: _function_call,
    Unary: _unary,
    Binary: _binary,
    Conditional: _conditional,
    Assign: _assign,
}
