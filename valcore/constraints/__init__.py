"""Declarative value validation

This module provides a set of classes to validate and document values.
In a nutshell, each of these :class:`Constraint` classes:

- focuses on a specific aspect, such as a check digit, or a condition
  expressed in an expression language
- is instantiated with a set of parameters to customize such an instance
  for a particular task, and rejects an unusable set of parameters right
  away
- performs its task by receiving an input via its ``__call__()`` method
- provides default auto-documentation

Individual :class:`Constraint` instances can be combined with logical
``and`` (:class:`AllOf`) and ``or`` (:class:`AnyOf`) operations to form
arbitrarily complex constructs.

A value that violates a constraint is reported with a
:class:`ConstraintError`. This is the only exception with this meaning.
When an engine cannot determine whether a value is valid (e.g., an
expression evaluates to ``null``), the engine's
:class:`~valcore.exceptions.EvaluationError` propagates unchanged, also
through :class:`AnyOf`.

If the provided input descriptions and error messages of a particular
constraint are not an optimal fit for a particular context, they can be
replaced by wrapping a constraint instance into :class:`WithDescription`.

.. currentmodule:: valcore.constraints
.. autosummary::
   :toctree: generated

   Constraint
   AllOf
   AnyOf
   ConstraintError
   WithDescription
   EnsureNotNone
   EnsureNotBlank
   EnsureModulus
   EnsureNotNoneModulus
   EnsureCreditCardNumber
   EnsureExpression
   EnsureParamsExpression
"""

__all__ = [
    'Constraint',
    'AllOf',
    'AnyOf',
    'ConstraintError',
    'WithDescription',
    'EnsureNotNone',
    'EnsureNotBlank',
    'EnsureModulus',
    'EnsureNotNoneModulus',
    'EnsureCreditCardNumber',
    'EnsureExpression',
    'EnsureParamsExpression',
]


from .basic import (
    EnsureNotBlank,
    EnsureNotNone,
)
from .constraint import (
    AllOf,
    AnyOf,
    Constraint,
)
from .exceptions import (
    ConstraintError,
)
from .expression import (
    EnsureExpression,
    EnsureParamsExpression,
)
from .modulus import (
    EnsureCreditCardNumber,
    EnsureModulus,
    EnsureNotNoneModulus,
)
from .wrapper import WithDescription
