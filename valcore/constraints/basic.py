from __future__ import annotations

from typing import Any

from valcore.constraints.constraint import Constraint


class EnsureNotNone(Constraint):
    """Ensure a value is present

    Most other constraints consider an absent value (``None``) to be valid.
    Combine them with this constraint (``EnsureNotNone() & other``) to
    require a value.
    """

    @property
    def input_synopsis(self):
        return 'not None'

    def __call__(self, value: Any) -> Any:
        if value is None:
            self.raise_for(value, 'must not be None')
        return value


class EnsureNotBlank(Constraint):
    """Ensure a string is present and has non-whitespace content"""

    @property
    def input_synopsis(self):
        return 'non-blank string'

    def __call__(self, value: Any) -> Any:
        if value is None:
            self.raise_for(value, 'must not be None')
        if not isinstance(value, str):
            self.raise_for(
                value,
                'is not a string, but {type}',
                type=type(value).__name__,
            )
        if not value.strip():
            self.raise_for(value, 'must not be blank')
        return value
