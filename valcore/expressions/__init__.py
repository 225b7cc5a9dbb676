"""Pluggable evaluation of boolean expressions

An :class:`ExpressionSpec` declares an expression text, the language it is
written in, and the names under which values are exposed to it. An
:class:`ExpressionEvaluator` prepares such a declaration once, and then
evaluates it for any number of values::

  >>> ev = ExpressionEvaluator(
  ...     ExpressionSpec('value != null && fn:length(value) > 3', ('value',)))
  >>> ev.evaluate_object('valid')
  True

The language identifier selects the backend. :data:`EMBEDDED_LANGUAGE`
selects the built-in interpreter of :mod:`valcore.expressions.el`. Any other
identifier is looked up in an :class:`EngineRegistry`, which has a
restricted Python expression engine registered as ``'python'``.

The result of an expression must be a ``bool``. Anything else is an error.
All errors are defined in :mod:`valcore.exceptions`.

.. currentmodule:: valcore.expressions
.. autosummary::
   :toctree: generated

   BindingEnvironment
   Capabilities
   EngineRegistry
   ExpressionBackend
   ExpressionEvaluator
   ExpressionSpec
   EvaluatorState
   ExternalEngineBackend
   PreparedExpression
   PythonScriptEngine
   ScriptEngine
   EMBEDDED_LANGUAGE
   evaluate
   get_registry
   prepare
"""

__all__ = [
    'BindingEnvironment',
    'Capabilities',
    'EngineRegistry',
    'ExpressionBackend',
    'ExpressionEvaluator',
    'ExpressionSpec',
    'EvaluatorState',
    'ExternalEngineBackend',
    'PreparedExpression',
    'PythonScriptEngine',
    'ScriptEngine',
    'EMBEDDED_LANGUAGE',
    'evaluate',
    'get_registry',
    'prepare',
]

from valcore.consts import EMBEDDED_LANGUAGE

from .backend import (
    ExpressionBackend,
    ExternalEngineBackend,
    ScriptEngine,
)
from .bindings import BindingEnvironment
from .capabilities import Capabilities
from .evaluator import (
    EvaluatorState,
    ExpressionEvaluator,
    ExpressionSpec,
    PreparedExpression,
    evaluate,
    prepare,
)
from .python_engine import PythonScriptEngine
from .registry import (
    EngineRegistry,
    get_registry,
)
