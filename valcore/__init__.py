"""Constraint evaluation engine

The two engines of this package are a configurable check-digit (modulus)
algorithm in :mod:`valcore.checkdigit`, and a pluggable expression
evaluator in :mod:`valcore.expressions`. :mod:`valcore.constraints`
wraps both into :class:`~valcore.constraints.Constraint` classes that
validate individual values.
"""

__version__ = '0.1.0'
