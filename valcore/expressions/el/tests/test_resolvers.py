from types import SimpleNamespace

import pytest

from valcore.consts import UnsetValue
from valcore.exceptions import ReadOnlyAssignment
from valcore.expressions.bindings import BindingEnvironment
from valcore.expressions.el.functions import DEFAULT_FUNCTIONS
from valcore.expressions.el.interpreter import EvaluationContext
from valcore.expressions.el.resolvers import (
    DEFAULT_RESOLVER,
    ArrayResolver,
    AttributeResolver,
    BindingResolver,
    CompositeResolver,
    ListResolver,
    MappingResolver,
    SubscriptResolver,
)
from valcore.expressions.el.variables import EMPTY_VARIABLES


@pytest.fixture
def ctx():
    return EvaluationContext(
        bindings=BindingEnvironment.for_object('value', None),
        resolver=DEFAULT_RESOLVER,
        functions=DEFAULT_FUNCTIONS,
        variables=EMPTY_VARIABLES,
    )


def test_binding_resolver(ctx):
    r = BindingResolver()
    # a bound null is resolved
    assert r.get_value(ctx, None, 'value') is None
    assert r.get_value(ctx, None, 'other') is UnsetValue
    # only bare identifiers
    assert r.get_value(ctx, {'value': 1}, 'value') is UnsetValue


def test_array_and_list_resolver(ctx):
    assert ArrayResolver().get_value(ctx, (1, 2), 1) == 2  # noqa: PLR2004
    assert ArrayResolver().get_value(ctx, [1, 2], 1) is UnsetValue
    assert ArrayResolver().get_value(ctx, (1, 2), 'x') is UnsetValue
    assert ArrayResolver().get_value(ctx, (1, 2), True) is UnsetValue
    assert ListResolver().get_value(ctx, [1, 2], 1.0) == 2  # noqa: PLR2004
    assert ListResolver().get_value(ctx, [1, 2], 2) is None
    assert ListResolver().get_value(ctx, 'ab', 0) is UnsetValue
    # numeric strings index, other strings do not
    assert ListResolver().get_value(ctx, [1, 2], ' 1') == 2  # noqa: PLR2004
    assert ListResolver().get_value(ctx, [1, 2], '²') is UnsetValue
    assert ListResolver().get_value(ctx, [1, 2], '--1') is UnsetValue


def test_attribute_resolver(ctx):
    obj = SimpleNamespace(a=1, _b=2, m=lambda x: x * 2)
    r = AttributeResolver()
    assert r.get_value(ctx, obj, 'a') == 1
    assert r.get_value(ctx, obj, '_b') is UnsetValue
    assert r.get_value(ctx, obj, 'c') is UnsetValue
    assert r.get_value(ctx, {'a': 1}, 'a') is UnsetValue
    assert r.invoke(ctx, obj, 'm', (3,)) == 6  # noqa: PLR2004
    # not callable
    assert r.invoke(ctx, obj, 'a', ()) is UnsetValue


def test_mapping_and_subscript_resolver(ctx):
    assert MappingResolver().get_value(ctx, {'a': 1}, 'a') == 1
    assert MappingResolver().get_value(ctx, {'a': 1}, 'b') is None
    assert MappingResolver().get_value(ctx, [1], 0) is UnsetValue
    r = SubscriptResolver()
    assert r.get_value(ctx, 'abc', '1') == 'b'
    assert r.get_value(ctx, 'abc', 5) is UnsetValue
    assert r.get_value(ctx, object(), 0) is UnsetValue


def test_composite_resolver(ctx):
    r = CompositeResolver(MappingResolver(), BindingResolver())
    assert len(r.resolvers) == 2  # noqa: PLR2004
    assert r.get_value(ctx, {'a': 1}, 'a') == 1
    assert r.get_value(ctx, None, 'value') is None
    assert r.get_value(ctx, None, 'nothing') is UnsetValue
    assert r.invoke(ctx, {}, 'keys', ()) is UnsetValue
    assert repr(r) == 'CompositeResolver(MappingResolver(), BindingResolver())'


def test_resolver_set_value(ctx):
    for r in (DEFAULT_RESOLVER, MappingResolver()):
        with pytest.raises(ReadOnlyAssignment):
            r.set_value(ctx, {'a': 1}, 'a', 2)
