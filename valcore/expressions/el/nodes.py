"""Syntax tree of the embedded expression language

All nodes are frozen dataclasses. A parsed tree is never modified, and can
be evaluated concurrently by any number of threads.
"""

from __future__ import annotations

from dataclasses import (
    dataclass,
    fields,
)
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


class Node:
    """Base class of all syntax tree nodes"""

    def iter_children(self) -> Iterator[Node]:
        for f in fields(self):  # type: ignore[arg-type]
            val = getattr(self, f.name)
            if isinstance(val, Node):
                yield val
            elif isinstance(val, tuple):
                yield from (v for v in val if isinstance(v, Node))

    def walk(self) -> Iterator[Node]:
        """Yield this node and all its descendants, depth-first"""
        yield self
        for child in self.iter_children():
            yield from child.walk()


@dataclass(frozen=True)
class Literal(Node):
    value: Any


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class Member(Node):
    """Property access ``base.name``"""

    base: Node
    name: str


@dataclass(frozen=True)
class Index(Node):
    """Property access ``base[index]``"""

    base: Node
    index: Node


@dataclass(frozen=True)
class MethodCall(Node):
    base: Node
    name: str
    args: tuple[Node, ...]


@dataclass(frozen=True)
class FunctionCall(Node):
    """Call of a function from the function table, ``prefix:name(args)``

    The prefix is an empty string for functions called without a
    namespace.
    """

    prefix: str
    name: str
    args: tuple[Node, ...]

    @property
    def qualified_name(self) -> str:
        return f'{self.prefix}:{self.name}'


@dataclass(frozen=True)
class Unary(Node):
    op: str
    """One of ``-``, ``!``, ``empty``"""
    operand: Node


@dataclass(frozen=True)
class Binary(Node):
    op: str
    """Canonical operator symbol, keyword aliases like ``and`` or ``eq``
    are normalized by the parser"""
    left: Node
    right: Node


@dataclass(frozen=True)
class Conditional(Node):
    """Ternary ``test ? then : otherwise``"""

    test: Node
    then: Node
    otherwise: Node


@dataclass(frozen=True)
class Assign(Node):
    target: Node
    value: Node


@dataclass(frozen=True)
class ParsedExpression:
    """Result of parsing an expression text"""

    text: str
    root: Node
