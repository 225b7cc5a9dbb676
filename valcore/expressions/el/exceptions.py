"""Errors raised inside the embedded interpreter

These never leave :mod:`valcore.expressions`. Syntax errors are reported as
:class:`~valcore.exceptions.InvalidExpression`, and evaluation errors as
:class:`~valcore.exceptions.BackendFailure` (with the underlying error as
``__cause__``).
"""

from __future__ import annotations


class ELError(Exception):
    """Base class of all interpreter errors"""


class ExpressionSyntaxError(ELError):
    def __init__(self, msg: str, position: int):
        super().__init__(msg, position)

    @property
    def position(self) -> int:
        return self.args[1]

    def __str__(self) -> str:
        return f'{self.args[0]} (at offset {self.position})'


class PropertyNotFound(ELError):
    """A name or property could not be resolved"""


class MethodNotFound(ELError):
    """A method could not be resolved on its base object"""


class FunctionNotFound(ELError):
    """A ``prefix:name`` function is not in the function table"""


class CoercionError(ELError):
    """A value cannot be coerced to the type an operator requires"""
