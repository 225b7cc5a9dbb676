import pytest

from valcore.expressions.el.exceptions import ExpressionSyntaxError
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
    Unary,
)
from valcore.expressions.el.parser import (
    parse,
    strip_delimiters,
)


def test_strip_delimiters():
    assert strip_delimiters('${a > 1}') == 'a > 1'
    assert strip_delimiters(' #{a} ') == 'a'
    assert strip_delimiters('a > 1') == 'a > 1'
    # not a wrapper
    assert strip_delimiters('{a}') == '{a}'


def test_parse_precedence():
    root = parse('a || b && !c == 1 + 2 * 3').root
    assert root == Binary(
        '||',
        Identifier('a'),
        Binary(
            '&&',
            Identifier('b'),
            Binary(
                '==',
                Unary('!', Identifier('c')),
                Binary(
                    '+',
                    Literal(1),
                    Binary('*', Literal(2), Literal(3)),
                ),
            ),
        ),
    )


def test_parse_left_associative():
    assert parse('10 - 4 - 3').root == Binary(
        '-', Binary('-', Literal(10), Literal(4)), Literal(3)
    )


def test_parse_keyword_aliases():
    assert parse('a and not b').root == parse('a && !b').root
    assert parse('a eq 1 or a ge 2').root == parse('a == 1 || a >= 2').root
    assert parse('a div 2 mod 3').root == parse('a / 2 % 3').root
    assert parse('empty a').root == Unary('empty', Identifier('a'))


def test_parse_postfix():
    assert parse('a.b[0].c(1, "x")').root == MethodCall(
        Index(Member(Identifier('a'), 'b'), Literal(0)),
        'c',
        (Literal(1), Literal('x')),
    )
    # keywords are valid property names
    assert parse('a.empty').root == Member(Identifier('a'), 'empty')


def test_parse_functions():
    assert parse('fn:length(v)').root == FunctionCall(
        'fn', 'length', (Identifier('v'),)
    )
    assert parse('f()').root == FunctionCall('', 'f', ())
    # with whitespace, the colon belongs to a conditional
    assert parse('a ? b : c(x)').root == Conditional(
        Identifier('a'),
        Identifier('b'),
        FunctionCall('', 'c', (Identifier('x'),)),
    )


def test_parse_conditional_nested():
    assert parse('a ? 1 : b ? 2 : 3').root == Conditional(
        Identifier('a'),
        Literal(1),
        Conditional(Identifier('b'), Literal(2), Literal(3)),
    )


def test_parse_assignment():
    assert parse('a.b = 1').root == Assign(Member(Identifier('a'), 'b'), Literal(1))


def test_parse_keeps_text():
    parsed = parse('${a}')
    assert parsed.text == '${a}'
    assert parsed.root == Identifier('a')


def test_parse_walk():
    root = parse('fn:length(a.b) > x').root
    assert [type(n).__name__ for n in root.walk()] == [
        'Binary',
        'FunctionCall',
        'Member',
        'Identifier',
        'Identifier',
    ]


@pytest.mark.parametrize(
    ('text', 'match'),
    [
        ('', 'empty expression'),
        ('   ', 'empty expression'),
        ('a >', 'unexpected end of expression'),
        ('(a', r"expected '\)'"),
        ('a b', "unexpected 'b'"),
        ('f(a,', 'unexpected end of expression'),
        ('a ? b', "expected ':'"),
        ('a.(b)', 'expected property name'),
        ('a[1', "expected ']'"),
    ],
)
def test_parse_errors(text, match):
    with pytest.raises(ExpressionSyntaxError, match=match):
        parse(text)
