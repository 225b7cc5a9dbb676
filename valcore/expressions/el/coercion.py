"""Type coercion rules of the embedded expression language

The rules follow the unified expression language, where ``null`` is ``0`` in
arithmetic and ``false`` in logical operations, and numeric strings take
part in arithmetic.
"""

from __future__ import annotations

import operator
from collections.abc import Sized
from decimal import Decimal
from numbers import Number
from typing import Any

from valcore.expressions.el.exceptions import CoercionError


def is_number(value: Any) -> bool:
    # bool is an int subclass, but never a number here
    return isinstance(value, Number) and not isinstance(value, bool)


def to_boolean(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == 'true'
    msg = f'cannot coerce {type(value).__name__} to a boolean'
    raise CoercionError(msg)


def to_number(value: Any) -> int | float | Decimal:
    if value is None:
        return 0
    if is_number(value):
        return value
    if isinstance(value, str):
        if not value.strip():
            return 0
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            msg = f'cannot coerce {value!r} to a number'
            raise CoercionError(msg) from None
    msg = f'cannot coerce {type(value).__name__} to a number'
    raise CoercionError(msg)


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


_arithmetic = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '%': operator.mod,
}


def arithmetic(op: str, left: Any, right: Any) -> Any:
    a, b = to_number(left), to_number(right)
    if op == '/':
        if not b:
            msg = 'division by zero'
            raise CoercionError(msg)
        # division always yields a floating point number
        return a / b
    if op == '%' and not b:
        msg = 'modulo by zero'
        raise CoercionError(msg)
    return _arithmetic[op](a, b)


def equals(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return left is right
    if is_number(left) or is_number(right):
        return to_number(left) == to_number(right)
    if isinstance(left, bool) or isinstance(right, bool):
        return to_boolean(left) == to_boolean(right)
    if isinstance(left, str) or isinstance(right, str):
        return str(left) == str(right)
    return left == right


_relational = {
    '<': operator.lt,
    '>': operator.gt,
    '<=': operator.le,
    '>=': operator.ge,
}


def compare(op: str, left: Any, right: Any) -> bool:
    if op in ('<=', '>=') and equals(left, right):
        return True
    if left is None or right is None:
        return False
    if is_number(left) or is_number(right):
        left, right = to_number(left), to_number(right)
    try:
        return _relational[op](left, right)
    except TypeError as e:
        msg = (
            f'cannot compare {type(left).__name__} and '
            f'{type(right).__name__}'
        )
        raise CoercionError(msg) from e
