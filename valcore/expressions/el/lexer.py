"""Tokenizer for the embedded expression language"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from valcore.expressions.el.exceptions import ExpressionSyntaxError

# str.isdigit() also accepts superscripts, which int() rejects
_DIGITS = frozenset('0123456789')


class TokenType(Enum):
    """Enumeration of token types"""

    number = 'number'
    string = 'string'
    identifier = 'identifier'
    keyword = 'keyword'
    operator = 'operator'
    end = 'end'


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Any
    position: int
    """Offset of the first character of the token in the expression"""
    length: int = 0

    @property
    def end(self) -> int:
        """Offset right after the last character of the token"""
        return self.position + self.length

    def is_op(self, *ops: str) -> bool:
        return self.type in (TokenType.operator, TokenType.keyword) and (
            self.value in ops
        )


KEYWORDS = frozenset(
    (
        'true',
        'false',
        'null',
        'and',
        'or',
        'not',
        'empty',
        'div',
        'mod',
        'eq',
        'ne',
        'lt',
        'gt',
        'le',
        'ge',
    )
)

# longest first, such that '<=' wins over '<'
OPERATORS = (
    '&&',
    '||',
    '==',
    '!=',
    '<=',
    '>=',
    '+',
    '-',
    '*',
    '/',
    '%',
    '<',
    '>',
    '!',
    '?',
    ':',
    '.',
    '[',
    ']',
    '(',
    ')',
    ',',
    '=',
)

_ESCAPES = {
    '\\': '\\',
    "'": "'",
    '"': '"',
    'n': '\n',
    't': '\t',
}


def tokenize(text: str) -> list[Token]:
    """Split an expression into a list of tokens

    The list always ends with a token of type ``TokenType.end``.
    Raises :class:`ExpressionSyntaxError` on any character sequence that
    is not a valid token.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if char.isspace():
            pos += 1
            continue
        if char in _DIGITS or (
            char == '.' and pos + 1 < length and text[pos + 1] in _DIGITS
        ):
            token = _read_number(text, pos)
        elif char in ('"', "'"):
            token = _read_string(text, pos)
        elif char.isalpha() or char == '_':
            end = pos
            while end < length and (text[end].isalnum() or text[end] == '_'):
                end += 1
            word = text[pos:end]
            token = Token(
                TokenType.keyword if word in KEYWORDS else TokenType.identifier,
                word,
                pos,
                end - pos,
            )
        else:
            op = next((o for o in OPERATORS if text.startswith(o, pos)), None)
            if op is None:
                msg = f'unexpected character {char!r}'
                raise ExpressionSyntaxError(msg, pos)
            token = Token(TokenType.operator, op, pos, len(op))
        tokens.append(token)
        pos = token.end
    tokens.append(Token(TokenType.end, None, length))
    return tokens


def _read_number(text: str, start: int) -> Token:
    pos = start
    length = len(text)
    is_float = False
    while pos < length and text[pos] in _DIGITS:
        pos += 1
    if (
        pos + 1 < length
        and text[pos] == '.'
        and text[pos + 1] in _DIGITS
    ):
        is_float = True
        pos += 1
        while pos < length and text[pos] in _DIGITS:
            pos += 1
    if pos < length and text[pos] in 'eE':
        exp = pos + 1
        if exp < length and text[exp] in '+-':
            exp += 1
        if exp < length and text[exp] in _DIGITS:
            is_float = True
            pos = exp
            while pos < length and text[pos] in _DIGITS:
                pos += 1
    literal = text[start:pos]
    value = float(literal) if is_float else int(literal)
    return Token(TokenType.number, value, start, pos - start)


def _read_string(text: str, start: int) -> Token:
    quote = text[start]
    chars = []
    pos = start + 1
    while pos < len(text):
        char = text[pos]
        if char == '\\':
            if pos + 1 >= len(text):
                break
            escaped = text[pos + 1]
            if escaped not in _ESCAPES:
                msg = f'unsupported escape sequence \\{escaped}'
                raise ExpressionSyntaxError(msg, pos)
            chars.append(_ESCAPES[escaped])
            pos += 2
            continue
        if char == quote:
            return Token(TokenType.string, ''.join(chars), start, pos + 1 - start)
        chars.append(char)
        pos += 1
    msg = 'unterminated string literal'
    raise ExpressionSyntaxError(msg, start)
