"""Base classes for constraints and their logical connectives"""

from __future__ import annotations

from abc import (
    ABC,
    abstractmethod,
)
from typing import Any

from valcore.constraints.exceptions import ConstraintError


class Constraint(ABC):
    """Base class for value validation

    A constraint is called with a value. It returns the value if it is
    valid, and raises :class:`ConstraintError` if it is not. Any other
    exception signals that the constraint could not decide.
    """

    def __str__(self) -> str:
        """Rudimentary self-description"""
        return f'Constraint[{self.input_synopsis}]'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'

    def raise_for(self, value: Any, msg: str, **ctx: Any) -> None:
        """Raise a :class:`ConstraintError` for this constraint

        Keyword arguments are passed on as the error context.
        """
        if ctx:
            raise ConstraintError(self, value, msg, ctx)
        raise ConstraintError(self, value, msg)

    def is_valid(self, value: Any) -> bool:
        """Return whether ``value`` satisfies the constraint

        Only a :class:`ConstraintError` counts as "not valid". All other
        exceptions propagate.
        """
        try:
            self(value)
        except ConstraintError:
            return False
        return True

    def __and__(self, other: Constraint) -> Constraint:
        return AllOf(self, other)

    def __or__(self, other: Constraint) -> Constraint:
        return AnyOf(self, other)

    @property
    @abstractmethod
    def input_synopsis(self) -> str:
        """Returns brief, single line summary of valid input for a constraint

        This information is user-facing, and to be used in any place where
        space is limited (tooltips, usage summaries, etc).
        """

    @property
    def input_description(self) -> str:
        """Returns full description of valid input for a constraint

        Like ``input_synopsis`` this information is user-facing, but without
        a length limit. By default, it is identical to the synopsis.
        """
        return self.input_synopsis

    @abstractmethod
    def __call__(self, value: Any):
        """Validate ``value``, and return it"""


class _MultiConstraint(Constraint):
    """Helper class to override the description methods to reported
    multiple constraints
    """

    def __init__(self, *constraints: Constraint):
        self._constraints = constraints

    def __repr__(self) -> str:
        creprs = ', '.join(f'{c!r}' for c in self.constraints)
        return f'{self.__class__.__name__}({creprs})'

    @property
    def constraints(self) -> tuple[Constraint, ...]:
        return self._constraints

    def _get_description(self, attr: str, operation: str) -> str:
        cs = [getattr(c, attr) for c in self.constraints if hasattr(c, attr)]
        return f' {operation} '.join(c for c in cs if c)


class AnyOf(_MultiConstraint):
    """Logical OR for constraints.

    Constraints are tried in the given order. The first one that does not
    raise a :class:`ConstraintError` determines the return value. Any other
    exception is not a failed alternative, and propagates immediately.
    """

    def __or__(self, other: Constraint) -> Constraint:
        constraints = list(self.constraints)
        if isinstance(other, AnyOf):
            constraints.extend(other.constraints)
        else:
            constraints.append(other)
        return AnyOf(*constraints)

    def __call__(self, value: Any) -> Any:
        e_list = []
        for c in self.constraints:
            try:
                return c(value)
            except ConstraintError as e:
                e_list.append(e)
        self.raise_for(  # noqa: RET503
            value,
            # plural OK, no sense in having 1 "alternative"
            'does not match any of {n_alternatives} alternatives\n'
            '{__itemized_causes__}',
            constraints=self.constraints,
            n_alternatives=len(self.constraints),
            __caused_by__=e_list,
        )

    @property
    def input_synopsis(self) -> str:
        return self._get_description('input_synopsis', 'or')

    @property
    def input_description(self) -> str:
        return self._get_description('input_description', 'or')


class AllOf(_MultiConstraint):
    """Logical AND for constraints.

    Constraints are evaluated in the given order, each receiving the
    return value of its predecessor. No exceptions are caught.
    """

    def __and__(self, other: Constraint) -> Constraint:
        constraints = list(self.constraints)
        if isinstance(other, AllOf):
            constraints.extend(other.constraints)
        else:
            constraints.append(other)
        return AllOf(*constraints)

    def __call__(self, value: Any) -> Any:
        for c in self.constraints:
            value = c(value)
        return value

    @property
    def input_synopsis(self) -> str:
        return self._get_description('input_synopsis', 'and')

    @property
    def input_description(self) -> str:
        return self._get_description('input_description', 'and')
