from __future__ import annotations

from textwrap import indent
from types import MappingProxyType
from typing import (
    Any,
)


class ConstraintError(ValueError):
    """Raised by a constraint when a value violates it

    This is the only exception that means "the value is invalid". Any other
    exception raised by a constraint means that the validity of the value
    could not be determined at all.

    The error carries the violated constraint, the offending value, and a
    message template with an optional context mapping for structured
    reporting.
    """

    def __init__(
        self,
        constraint,
        value: Any,
        msg: str,
        ctx: dict[str, Any] | None = None,
    ):
        """
        Parameters
        ----------
        constraint: Constraint
          The violated constraint.
        value:
          The value in violation of the constraint.
        msg: str
          Message template in ``str.format()`` syntax. Placeholders are
          filled from ``ctx``, when the message is accessed.
        ctx: dict, optional
          Context information on the violation. The key ``'__caused_by__'``
          can hold one exception, or a tuple of exceptions, that led to
          the violation.
        """
        # `msg` goes first, where ValueError would have it
        super().__init__(msg, constraint, value, ctx)

    @property
    def msg(self) -> str:
        """The message template, interpolated with the error context

        Besides the keys of the context, two placeholders are supported:

        - ``__value__``: the offending value
        - ``__itemized_causes__``: an indented bullet list with one item
          per exception in :attr:`caused_by`
        """
        ctx = dict(self.context)
        ctx['__value__'] = self.value
        if self.caused_by:
            ctx['__itemized_causes__'] = indent(
                '\n'.join(f'- {c!s}' for c in self.caused_by),
                '  ',
            )
        return self.args[0].format(**ctx)

    @property
    def constraint(self):
        """The violated constraint"""
        return self.args[1]

    @property
    def value(self):
        """The value in violation of the constraint"""
        return self.args[2]

    @property
    def context(self) -> MappingProxyType:
        """Read-only view of the error context mapping"""
        return MappingProxyType(self.args[3] or {})

    @property
    def caused_by(self) -> tuple[Exception, ...] | None:
        """Exceptions that led to the violation, if any"""
        cb = self.context.get('__caused_by__', None)
        if cb is None:
            return None
        if isinstance(cb, Exception):
            return (cb,)
        return tuple(cb)

    def __str__(self) -> str:
        return self.msg

    def __repr__(self) -> str:
        # constructor argument order, not `.args` order
        msg, constraint, value, ctx = self.args
        return (
            f'{self.__class__.__name__}({constraint!r}, {value!r}, '
            f'{msg!r}, {ctx!r})'
        )
