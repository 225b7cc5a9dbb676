"""Function table of the embedded expression language

Functions are called as ``prefix:name(args)`` in an expression. They are
looked up in a :class:`FunctionTable` by their qualified name
``'prefix:name'``. Functions called without a prefix use an empty prefix,
i.e. ``':name'``.

The default table is seeded with string functions in the ``fn`` namespace,
modeled after the standard function library of the unified expression
language. A ``null`` argument is treated like an empty string throughout.
"""

from __future__ import annotations

import re
from collections.abc import (
    Iterable,
    Iterator,
    Mapping,
)
from html import escape
from types import MappingProxyType
from typing import (
    Any,
    Callable,
)


class FunctionTable(Mapping):
    """Immutable mapping of qualified function names to callables

    A table is never modified after creation. :meth:`with_function` returns
    an extended copy, hence a table can be shared across threads, and
    extended without affecting already prepared expressions.
    """

    def __init__(self, functions: Mapping[str, Callable] | None = None):
        self._functions = MappingProxyType(dict(functions or {}))

    def __getitem__(self, key: str) -> Callable:
        return self._functions[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({sorted(self._functions)!r})'

    def resolve(self, prefix: str, name: str) -> Callable | None:
        """Return the function registered for ``prefix:name``, or ``None``"""
        return self._functions.get(f'{prefix}:{name}')

    def with_function(
        self,
        prefix: str,
        name: str,
        func: Callable,
    ) -> FunctionTable:
        """Return a new table with ``func`` registered as ``prefix:name``"""
        return self.__class__({**self._functions, f'{prefix}:{name}': func})


def _s(value: Any) -> str:
    return '' if value is None else str(value)


def _length(value: Any) -> int:
    if value is None:
        return 0
    return len(value)


def _substring(value: Any, begin: int, end: int = -1) -> str:
    s = _s(value)
    begin = max(int(begin), 0)
    end = len(s) if int(end) < 0 else min(int(end), len(s))
    return s[begin:end] if begin < end else ''


def _substring_after(value: Any, sub: Any) -> str:
    s, sub = _s(value), _s(sub)
    idx = s.find(sub)
    return '' if idx < 0 else s[idx + len(sub):]


def _substring_before(value: Any, sub: Any) -> str:
    s, sub = _s(value), _s(sub)
    idx = s.find(sub)
    return '' if idx < 0 else s[:idx]


def _split(value: Any, delimiters: Any) -> list[str]:
    s, delims = _s(value), _s(delimiters)
    if not delims:
        return [s] if s else []
    pattern = '[' + re.escape(delims) + ']'
    return [t for t in re.split(pattern, s) if t]


def _join(values: Iterable | None, separator: Any) -> str:
    if values is None:
        return ''
    return _s(separator).join(_s(v) for v in values)


BUILTIN_FUNCTIONS: Mapping[str, Callable] = MappingProxyType(
    {
        'fn:length': _length,
        'fn:contains': lambda s, sub: _s(sub) in _s(s),
        'fn:containsIgnoreCase': lambda s, sub: _s(sub).lower() in _s(s).lower(),
        'fn:startsWith': lambda s, prefix: _s(s).startswith(_s(prefix)),
        'fn:endsWith': lambda s, suffix: _s(s).endswith(_s(suffix)),
        'fn:indexOf': lambda s, sub: _s(s).find(_s(sub)),
        'fn:substring': _substring,
        'fn:substringAfter': _substring_after,
        'fn:substringBefore': _substring_before,
        'fn:toLowerCase': lambda s: _s(s).lower(),
        'fn:toUpperCase': lambda s: _s(s).upper(),
        'fn:trim': lambda s: _s(s).strip(),
        'fn:replace': lambda s, before, after: _s(s).replace(_s(before), _s(after)),
        'fn:split': _split,
        'fn:join': _join,
        'fn:escapeXml': lambda s: escape(_s(s), quote=True),
        'fn:matches': lambda s, pattern: re.fullmatch(_s(pattern), _s(s)) is not None,
    }
)
"""Static registry of built-in functions"""

DEFAULT_FUNCTIONS = FunctionTable(BUILTIN_FUNCTIONS)
