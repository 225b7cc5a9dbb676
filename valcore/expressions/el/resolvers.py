"""Property resolution for the embedded expression language

A resolver maps a ``(base, property)`` pair to a value. For bare identifiers
the base is ``None``. Resolvers are combined into a
:class:`CompositeResolver` that queries them in order, until one of them
resolves the property.

A resolver that does not handle a particular pair returns ``UnsetValue``.
This is different from returning ``None``, which is a resolved ``null``.

All resolvers are stateless, and can be shared by any number of concurrent
evaluations. Bound values are never modified through a resolver:
:meth:`Resolver.set_value` always raises
:class:`~valcore.exceptions.ReadOnlyAssignment`.
"""

from __future__ import annotations

from abc import (
    ABC,
    abstractmethod,
)
from collections.abc import (
    Mapping,
    Sequence,
)
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from valcore.expressions.el.interpreter import EvaluationContext

from valcore.consts import UnsetValue
from valcore.exceptions import ReadOnlyAssignment


class Resolver(ABC):
    """Base class for property resolvers"""

    @abstractmethod
    def get_value(
        self,
        context: EvaluationContext,
        base: Any,
        prop: Any,
    ) -> Any:
        """Return the value of ``prop`` of ``base``, or ``UnsetValue``"""

    def invoke(
        self,
        context: EvaluationContext,  # noqa: ARG002
        base: Any,  # noqa: ARG002
        method: str,  # noqa: ARG002
        args: tuple[Any, ...],  # noqa: ARG002
    ) -> Any:
        """Call ``method`` on ``base``, or return ``UnsetValue``

        The default implementation does not support any method calls.
        """
        return UnsetValue

    def set_value(
        self,
        context: EvaluationContext,  # noqa: ARG002
        base: Any,  # noqa: ARG002
        prop: Any,
        value: Any,  # noqa: ARG002
    ) -> None:
        raise ReadOnlyAssignment(str(prop))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'


def _to_index(prop: Any) -> int | None:
    if isinstance(prop, bool):
        return None
    if isinstance(prop, int):
        return prop
    if isinstance(prop, float) and prop.is_integer():
        return int(prop)
    if isinstance(prop, str):
        text = prop.strip()
        digits = text[1:] if text.startswith('-') else text
        # ASCII only, int() rejects other characters that pass isdigit()
        if digits.isascii() and digits.isdigit():
            return int(text)
    return None


def _get_item(base: Sequence, prop: Any) -> Any:
    idx = _to_index(prop)
    if idx is None:
        return UnsetValue
    # out of range is null, not an error
    if not 0 <= idx < len(base):
        return None
    return base[idx]


class ArrayResolver(Resolver):
    """Index access on tuples, the closest thing to a fixed-size array"""

    def get_value(self, context, base, prop):  # noqa: ARG002
        if not isinstance(base, tuple):
            return UnsetValue
        return _get_item(base, prop)


class AttributeResolver(Resolver):
    """Access to public attributes and methods of arbitrary objects

    Names starting with an underscore are never resolved. Mappings are
    left to :class:`MappingResolver`, such that ``mapping.key`` looks up
    a key and not an attribute of the mapping type.
    """

    @staticmethod
    def _handles(base: Any, name: Any) -> bool:
        return (
            base is not None
            and isinstance(name, str)
            and not name.startswith('_')
            and not isinstance(base, Mapping)
        )

    def get_value(self, context, base, prop):  # noqa: ARG002
        if not self._handles(base, prop):
            return UnsetValue
        return getattr(base, prop, UnsetValue)

    def invoke(self, context, base, method, args):  # noqa: ARG002
        if not self._handles(base, method):
            return UnsetValue
        func = getattr(base, method, None)
        if not callable(func):
            return UnsetValue
        return func(*args)


class BindingResolver(Resolver):
    """Resolve bare identifiers to the values of the binding environment"""

    def get_value(self, context, base, prop):
        if base is not None or prop not in context.bindings:
            return UnsetValue
        return context.bindings[prop]


class ListResolver(Resolver):
    """Index access on (mutable) sequences, except for strings"""

    def get_value(self, context, base, prop):  # noqa: ARG002
        if not isinstance(base, Sequence) or isinstance(base, (str, bytes)):
            return UnsetValue
        return _get_item(base, prop)


class MappingResolver(Resolver):
    """Key access on mappings, a missing key resolves to null"""

    def get_value(self, context, base, prop):  # noqa: ARG002
        if not isinstance(base, Mapping):
            return UnsetValue
        return base.get(prop)


class SubscriptResolver(Resolver):
    """Fallback for any other object that supports ``base[prop]``"""

    def get_value(self, context, base, prop):  # noqa: ARG002
        if base is None or not hasattr(base, '__getitem__'):
            return UnsetValue
        key = _to_index(prop) if isinstance(base, (str, bytes)) else prop
        if key is None:
            return UnsetValue
        try:
            return base[key]
        except (LookupError, TypeError):
            return UnsetValue


class CompositeResolver(Resolver):
    """Ordered chain of resolvers, the first to resolve a property wins"""

    def __init__(self, *resolvers: Resolver):
        self._resolvers = resolvers

    @property
    def resolvers(self) -> tuple[Resolver, ...]:
        return self._resolvers

    def __repr__(self) -> str:
        rreprs = ', '.join(f'{r!r}' for r in self.resolvers)
        return f'{self.__class__.__name__}({rreprs})'

    def get_value(self, context, base, prop):
        for r in self._resolvers:
            value = r.get_value(context, base, prop)
            if value is not UnsetValue:
                return value
        return UnsetValue

    def invoke(self, context, base, method, args):
        for r in self._resolvers:
            value = r.invoke(context, base, method, args)
            if value is not UnsetValue:
                return value
        return UnsetValue


DEFAULT_RESOLVER = CompositeResolver(
    ArrayResolver(),
    AttributeResolver(),
    BindingResolver(),
    ListResolver(),
    MappingResolver(),
    SubscriptResolver(),
)
"""Resolver chain used by the embedded backend, unless configured otherwise
"""
