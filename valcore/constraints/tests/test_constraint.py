import pytest

from valcore.constraints.constraint import (
    AllOf,
    AnyOf,
    Constraint,
)
from valcore.constraints.exceptions import ConstraintError
from valcore.exceptions import NullResult


class IsTrue(Constraint):
    input_synopsis = 'must be `True`'
    input_description = 'long-form of saying: it must be `True`'

    def __call__(self, value):
        if value is not True:
            self.raise_for(value, '{__value__} is not True')
        return True


class Equals5(Constraint):
    input_synopsis = 'must be `5`'
    input_description = 'long-form of saying: it must be `5`'

    def __call__(self, value):
        if value != 5:  # noqa: PLR2004
            self.raise_for(value, '{__value__} is not 5')
        return value


class EnsureInt(Constraint):
    input_synopsis = 'must be convertible to type INT'
    input_description = 'long-form of saying: it must be convertible to type INT'

    def __call__(self, value):
        try:
            return int(value)
        except ValueError as e:
            self.raise_for(
                value,
                '{__value__} is not convertible to INT',
                __caused_by__=e,
            )


class CannotDecide(Constraint):
    input_synopsis = 'anything, eventually'

    def __call__(self, value):
        raise NullResult('value')


def test_constraint_basics():
    c = IsTrue()
    assert str(c) == f'Constraint[{IsTrue.input_synopsis}]'
    assert repr(c) == f'{c.__class__.__name__}()'
    assert c(True) is True
    with pytest.raises(ConstraintError, match='False is not True') as e:
        c(False)
    assert e.value.value is False
    assert e.value.constraint is c


def test_constraint_is_valid():
    c = IsTrue()
    assert c.is_valid(True)
    assert not c.is_valid(False)
    # an undecidable value is not an invalid value
    with pytest.raises(NullResult):
        CannotDecide().is_valid(True)


def test_constraint_anyof():
    # logical OR
    c = IsTrue()
    eq5 = Equals5()
    true_or_5 = c | eq5
    assert isinstance(true_or_5, AnyOf)
    assert str(true_or_5) == f'Constraint[{c.input_synopsis} or {eq5.input_synopsis}]'
    assert repr(true_or_5) == f'{true_or_5.__class__.__name__}({c!r}, {eq5!r})'
    assert true_or_5(True) is True
    assert true_or_5(5) == 5  # noqa: PLR2004
    assert true_or_5(5.0) == 5.0  # noqa: PLR2004
    with pytest.raises(ConstraintError, match='not match any of 2') as e:
        true_or_5('five')
    assert len(e.value.caused_by) == 2  # noqa: PLR2004
    assert 'five is not 5' in str(e.value)

    # we can chain AnyOf, and we get no nesting
    true_or_5_or_int = true_or_5 | EnsureInt()
    assert len(true_or_5_or_int.constraints) == len(true_or_5.constraints) + 1
    # also works with AnyOf and AnyOf
    monster = true_or_5 | true_or_5_or_int
    assert len(monster.constraints) == len(true_or_5.constraints) + len(
        true_or_5_or_int.constraints
    )

    assert c.input_description in true_or_5.input_description
    assert eq5.input_description in true_or_5.input_description


def test_constraint_anyof_propagates_engine_errors():
    # an alternative that cannot decide is not a failed alternative
    c = CannotDecide() | IsTrue()
    with pytest.raises(NullResult):
        c(True)
    # but an earlier alternative that matches wins
    c = IsTrue() | CannotDecide()
    assert c(True) is True


def test_constraint_allof():
    # logical AND
    int5 = EnsureInt() & Equals5()
    assert isinstance(int5, AllOf)
    assert isinstance(int5('5'), int)
    assert int5('5') == 5  # noqa: PLR2004
    with pytest.raises(ConstraintError, match='five is not convertible to INT') as e:
        int5('five')
    assert isinstance(e.value.caused_by[0], ValueError)

    # test corner of of an AllOf of a single one
    eq5 = Equals5()
    aoeq5 = AllOf(eq5)
    assert str(aoeq5) == str(eq5)

    # check merge rules work out, chaining, not nesting
    assert len((aoeq5 & eq5).constraints) == len(aoeq5.constraints) + 1
    assert len((aoeq5 & int5).constraints) == len(aoeq5.constraints) + len(
        int5.constraints
    )

    assert EnsureInt().input_description in int5.input_description
    assert eq5.input_description in int5.input_description
