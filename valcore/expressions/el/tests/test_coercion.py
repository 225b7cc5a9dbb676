from decimal import Decimal

import pytest

from valcore.expressions.el.coercion import (
    arithmetic,
    compare,
    equals,
    is_empty,
    is_number,
    to_boolean,
    to_number,
)
from valcore.expressions.el.exceptions import CoercionError


def test_is_number():
    assert is_number(1)
    assert is_number(1.5)
    assert is_number(Decimal('1.5'))
    assert not is_number(True)
    assert not is_number('1')


def test_to_boolean():
    assert to_boolean(None) is False
    assert to_boolean(True) is True
    assert to_boolean('TRUE') is True
    assert to_boolean('yes') is False
    with pytest.raises(CoercionError, match='int to a boolean'):
        to_boolean(1)


def test_to_number():
    assert to_number(None) == 0
    assert to_number('') == 0
    assert to_number(' 12 ') == 12  # noqa: PLR2004
    assert to_number('1.5') == 1.5  # noqa: PLR2004
    assert to_number(Decimal(2)) == Decimal(2)
    with pytest.raises(CoercionError, match="'x' to a number"):
        to_number('x')
    with pytest.raises(CoercionError, match='list to a number'):
        to_number([])
    with pytest.raises(CoercionError):
        to_number(True)


def test_is_empty():
    assert is_empty(None)
    assert is_empty('')
    assert is_empty([])
    assert is_empty({})
    assert not is_empty('a')
    assert not is_empty(0)


def test_arithmetic():
    assert arithmetic('+', '1', 2) == 3  # noqa: PLR2004
    assert arithmetic('-', None, 2) == -2  # noqa: PLR2004
    assert arithmetic('/', 1, 4) == 0.25  # noqa: PLR2004
    with pytest.raises(CoercionError):
        arithmetic('/', 1, None)


def test_equals():
    assert equals(None, None)
    assert not equals(None, 0)
    assert not equals(0, None)
    # bool is not a number
    with pytest.raises(CoercionError):
        equals(1, True)
    assert equals(True, 'true')
    assert not equals(False, 'true')
    assert equals('a', 'a')
    assert equals([1], [1])


def test_compare():
    assert compare('<', 1, '2')
    assert compare('>=', None, None)
    assert not compare('<', None, 1)
    assert compare('<', 'a', 'b')
    with pytest.raises(CoercionError, match='cannot compare'):
        compare('<', 'a', [1])
