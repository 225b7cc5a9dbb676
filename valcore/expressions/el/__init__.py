"""Embedded expression interpreter

A self-contained interpreter for a subset of the unified expression language
(EL). Expressions may be wrapped in ``${...}``. Supported are literals
(``true``, ``false``, ``null``, numbers, quoted strings), property and index
access (``a.b``, ``a[b]``), method calls (``a.b(c)``), function calls
(``fn:length(a)``), arithmetic, relational, equality, and logical operators
(also in their keyword form, like ``and`` or ``eq``), ``empty``, and the
conditional operator ``a ? b : c``. For example::

  value != null && fn:length(value) > 3

.. currentmodule:: valcore.expressions.el
.. autosummary::
   :toctree: generated

   EmbeddedInterpreterBackend
   FunctionTable
   VariableTable
   BUILTIN_FUNCTIONS
   DEFAULT_RESOLVER
   get_embedded_backend
"""

__all__ = [
    'EmbeddedInterpreterBackend',
    'FunctionTable',
    'VariableTable',
    'BUILTIN_FUNCTIONS',
    'DEFAULT_RESOLVER',
    'get_embedded_backend',
]

from .backend import (
    EmbeddedInterpreterBackend,
    get_embedded_backend,
)
from .functions import (
    BUILTIN_FUNCTIONS,
    FunctionTable,
)
from .resolvers import DEFAULT_RESOLVER
from .variables import VariableTable
