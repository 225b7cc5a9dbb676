from __future__ import annotations

from collections.abc import (
    Iterable,
    Iterator,
    Mapping,
    Sequence,
)
from types import MappingProxyType
from typing import Any

from valcore.exceptions import ArityMismatch


class BindingEnvironment(Mapping):
    """Read-only, ordered mapping of names to the values exposed to an expression

    An environment is created for a single evaluation and discarded
    afterwards. Neither the environment nor its mapping of names can be
    modified once created. The bound values themselves are passed on
    as-is.

    Use :meth:`for_object` to expose a single value under one name, or
    :meth:`for_parameters` to expose a sequence of positional values under
    a matching sequence of names.
    """

    __slots__ = ('_bindings',)

    def __init__(self, bindings: Iterable[tuple[str, Any]] = ()):
        self._bindings = MappingProxyType(dict(bindings))

    @classmethod
    def for_object(cls, name: str, value: Any) -> BindingEnvironment:
        return cls(((name, value),))

    @classmethod
    def for_parameters(
        cls,
        names: Sequence[str],
        values: Sequence[Any],
    ) -> BindingEnvironment:
        """Bind ``values[i]`` to ``names[i]``

        Raises :class:`~valcore.exceptions.ArityMismatch` when the number
        of values does not match the number of names.
        """
        if len(values) != len(names):
            raise ArityMismatch(len(names), len(values))
        return cls(zip(names, values))

    def __getitem__(self, key: str) -> Any:
        return self._bindings[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({dict(self._bindings)!r})'
