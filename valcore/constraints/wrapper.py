from __future__ import annotations

from typing import Any

from valcore.constraints.constraint import Constraint
from valcore.constraints.exceptions import ConstraintError


class WithDescription(Constraint):
    """Constraint that wraps another constraint and replaces its description

    Validation is performed by the wrapped constraint. The wrapper only
    changes how it presents itself, and, optionally, the message of the
    :class:`ConstraintError` raised for a violation.
    """

    def __init__(
        self,
        constraint: Constraint,
        *,
        input_synopsis: str | None = None,
        input_description: str | None = None,
        error_message: str | None = None,
    ):
        """
        ``constraint`` can be any :class:`Constraint` subclass instance, and
        it will be used to perform the actual validation.

        If any of ``input_synopsis`` or ``input_description`` are given, they
        replace the respective property of the wrapped ``constraint``.

        If given, ``error_message`` replaces the message template of a
        :class:`ConstraintError` raised by the wrapped ``constraint``. The
        error context is kept. Errors of other types are not touched.
        """
        super().__init__()
        self._constraint = constraint
        self._synopsis = input_synopsis
        self._description = input_description
        self._error_message = error_message

    @property
    def constraint(self) -> Constraint:
        """Returns the wrapped constraint instance"""
        return self._constraint

    def __call__(self, value: Any) -> Any:
        try:
            return self._constraint(value)
        except ConstraintError as e:
            msg, _, value, ctx = e.args
            raise ConstraintError(
                self,
                value,
                self._error_message or msg,
                ctx,
            ) from e

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}'
            f'({self._constraint!r}, '
            f'input_synopsis={self._synopsis!r}, '
            f'input_description={self._description!r}, '
            f'error_message={self._error_message!r})'
        )

    @property
    def input_synopsis(self) -> str:
        return self._synopsis or self.constraint.input_synopsis

    @property
    def input_description(self) -> str:
        return self._description or self.constraint.input_description
