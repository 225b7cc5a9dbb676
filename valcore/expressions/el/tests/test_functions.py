import pytest

from valcore.expressions.el.functions import (
    BUILTIN_FUNCTIONS,
    DEFAULT_FUNCTIONS,
    FunctionTable,
)


def _fn(name):
    return DEFAULT_FUNCTIONS.resolve('fn', name)


def test_function_table():
    assert len(DEFAULT_FUNCTIONS) == len(BUILTIN_FUNCTIONS)
    assert 'fn:length' in DEFAULT_FUNCTIONS
    assert DEFAULT_FUNCTIONS.resolve('fn', 'bogus') is None
    assert DEFAULT_FUNCTIONS.resolve('', 'length') is None
    with pytest.raises(TypeError):
        BUILTIN_FUNCTIONS['fn:new'] = len  # type: ignore[index]


def test_function_table_extension():
    table = FunctionTable()
    extended = table.with_function('', 'double', lambda x: x * 2)
    # the extended table is a copy
    assert len(table) == 0
    assert extended.resolve('', 'double')(2) == 4  # noqa: PLR2004
    assert "':double'" in repr(extended)
    assert 'cc:luhn' in DEFAULT_FUNCTIONS.with_function('cc', 'luhn', bool)
    assert 'cc:luhn' not in DEFAULT_FUNCTIONS


def test_string_functions():
    assert _fn('length')('hello') == 5  # noqa: PLR2004
    assert _fn('length')(None) == 0
    assert _fn('contains')('hello', 'ell') is True
    assert _fn('containsIgnoreCase')('HELLO', 'ell') is True
    assert _fn('startsWith')('4417', '44') is True
    assert _fn('endsWith')('4417', '44') is False
    assert _fn('indexOf')('hello', 'l') == 2  # noqa: PLR2004
    assert _fn('indexOf')('hello', 'x') == -1
    assert _fn('toLowerCase')('AbC') == 'abc'
    assert _fn('toUpperCase')(None) == ''
    assert _fn('trim')('  x ') == 'x'
    assert _fn('replace')('a-b-c', '-', '') == 'abc'
    assert _fn('escapeXml')('<a & "b">') == '&lt;a &amp; &quot;b&quot;&gt;'
    assert _fn('matches')('4417', r'\d+') is True
    assert _fn('matches')('4417x', r'\d+') is False


def test_substring_functions():
    assert _fn('substring')('hello', 1, 3) == 'el'
    assert _fn('substring')('hello', -2, -1) == 'hello'
    assert _fn('substring')('hello', 3, 1) == ''
    assert _fn('substring')('hello', 2, 99) == 'llo'
    assert _fn('substringAfter')('key=value', '=') == 'value'
    assert _fn('substringAfter')('key', '=') == ''
    assert _fn('substringBefore')('key=value', '=') == 'key'


def test_split_join():
    assert _fn('split')('a,b;;c', ',;') == ['a', 'b', 'c']
    assert _fn('split')('', ',') == []
    assert _fn('split')('abc', '') == ['abc']
    assert _fn('join')(['a', None, 'c'], '-') == 'a--c'
    assert _fn('join')(None, '-') == ''
