"""Recursive descent parser for the embedded expression language

Operator precedence, from lowest to highest::

  =
  ?:
  || or
  && and
  == != eq ne
  < > <= >= lt gt le ge
  + -
  * / div % mod
  - ! not empty        (unary)
  . [] ()              (postfix)
"""

from __future__ import annotations

from valcore.expressions.el.exceptions import ExpressionSyntaxError
from valcore.expressions.el.lexer import (
    Token,
    TokenType,
    tokenize,
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
    ParsedExpression,
    Unary,
)

# keyword spellings of operators and their canonical symbol
_ALIASES = {
    'and': '&&',
    'or': '||',
    'not': '!',
    'eq': '==',
    'ne': '!=',
    'lt': '<',
    'gt': '>',
    'le': '<=',
    'ge': '>=',
    'div': '/',
    'mod': '%',
}

_LITERALS = {
    'true': True,
    'false': False,
    'null': None,
}


def strip_delimiters(text: str) -> str:
    """Remove a ``${...}`` or ``#{...}`` wrapper from an expression, if any"""
    stripped = text.strip()
    if stripped[:2] in ('${', '#{') and stripped.endswith('}'):
        return stripped[2:-1]
    return text


def parse(text: str) -> ParsedExpression:
    """Parse an expression text into a syntax tree

    Raises :class:`ExpressionSyntaxError` for any invalid expression.
    """
    return ParsedExpression(text, Parser(strip_delimiters(text)).parse())


class Parser:
    def __init__(self, text: str):
        self._tokens = tokenize(text)
        self._pos = 0

    def parse(self) -> Node:
        if self._peek().type is TokenType.end:
            msg = 'empty expression'
            raise ExpressionSyntaxError(msg, 0)
        node = self._assignment()
        token = self._peek()
        if token.type is not TokenType.end:
            msg = f'unexpected {token.value!r}'
            raise ExpressionSyntaxError(msg, token.position)
        return node

    #
    # token helpers
    #
    def _peek(self, offset: int = 0) -> Token:
        return self._tokens[min(self._pos + offset, len(self._tokens) - 1)]

    def _advance(self) -> Token:
        token = self._peek()
        self._pos += 1
        return token

    def _accept(self, *ops: str) -> str | None:
        """Consume the next token, if it is one of ``ops``

        Returns the canonical operator symbol, or ``None`` if nothing
        was consumed.
        """
        token = self._peek()
        if token.is_op(*ops):
            self._pos += 1
            return _ALIASES.get(token.value, token.value)
        return None

    def _expect(self, op: str) -> Token:
        token = self._peek()
        if not token.is_op(op):
            found = 'end of expression' if token.type is TokenType.end else repr(token.value)
            msg = f'expected {op!r}, found {found}'
            raise ExpressionSyntaxError(msg, token.position)
        return self._advance()

    #
    # grammar rules
    #
    def _assignment(self) -> Node:
        node = self._conditional()
        if self._accept('='):
            return Assign(node, self._assignment())
        return node

    def _conditional(self) -> Node:
        node = self._binary(0)
        if self._accept('?'):
            then = self._conditional()
            self._expect(':')
            otherwise = self._conditional()
            return Conditional(node, then, otherwise)
        return node

    _levels = (
        ('||', 'or'),
        ('&&', 'and'),
        ('==', '!=', 'eq', 'ne'),
        ('<', '>', '<=', '>=', 'lt', 'gt', 'le', 'ge'),
        ('+', '-'),
        ('*', '/', 'div', '%', 'mod'),
    )

    def _binary(self, level: int) -> Node:
        if level == len(self._levels):
            return self._unary()
        node = self._binary(level + 1)
        while True:
            op = self._accept(*self._levels[level])
            if op is None:
                return node
            node = Binary(op, node, self._binary(level + 1))

    def _unary(self) -> Node:
        op = self._accept('-', '!', 'not', 'empty')
        if op is not None:
            return Unary(op, self._unary())
        return self._postfix(self._primary())

    def _postfix(self, node: Node) -> Node:
        while True:
            if self._accept('.'):
                token = self._advance()
                if token.type not in (TokenType.identifier, TokenType.keyword):
                    msg = 'expected property name after "."'
                    raise ExpressionSyntaxError(msg, token.position)
                if self._accept('('):
                    node = MethodCall(node, token.value, self._arguments())
                else:
                    node = Member(node, token.value)
            elif self._accept('['):
                node = Index(node, self._assignment())
                self._expect(']')
            else:
                return node

    def _arguments(self) -> tuple[Node, ...]:
        """Parse a call's arguments, the opening parenthesis is consumed"""
        args: list[Node] = []
        if self._accept(')'):
            return ()
        while True:
            args.append(self._assignment())
            if self._accept(')'):
                return tuple(args)
            self._expect(',')

    def _primary(self) -> Node:
        token = self._advance()
        if token.type in (TokenType.number, TokenType.string):
            return Literal(token.value)
        if token.type is TokenType.keyword and token.value in _LITERALS:
            return Literal(_LITERALS[token.value])
        if token.is_op('('):
            node = self._assignment()
            self._expect(')')
            return node
        if token.type is TokenType.identifier:
            return self._identifier_or_call(token)
        found = 'end of expression' if token.type is TokenType.end else repr(token.value)
        msg = f'unexpected {found}'
        raise ExpressionSyntaxError(msg, token.position)

    def _identifier_or_call(self, token: Token) -> Node:
        colon, local, paren = self._peek(), self._peek(1), self._peek(2)
        # `prefix:name(` must be written without whitespace, to keep
        # it apart from the `:` of a conditional like `a ? b : c(x)`
        if (
            colon.is_op(':')
            and colon.position == token.end
            and local.type is TokenType.identifier
            and local.position == colon.end
            and paren.is_op('(')
        ):
            self._pos += 3
            return FunctionCall(token.value, local.value, self._arguments())
        if self._accept('('):
            return FunctionCall('', token.value, self._arguments())
        return Identifier(token.value)
