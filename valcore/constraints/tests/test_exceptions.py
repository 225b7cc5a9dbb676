from valcore.constraints.exceptions import ConstraintError

fake_constraint = None
value_placeholder = '4417123456789112'
msg_placeholder = 'sorry, {__value__!r} has a bad check digit. Why?\n{__itemized_causes__}'
msg_placeholder_nocause = 'sorry, {__value__!r} has a bad check digit'
cause_placeholder = RuntimeError('off by one')
ctx_placeholder = {'__caused_by__': cause_placeholder}
error_init_args = (fake_constraint, value_placeholder, msg_placeholder, ctx_placeholder)
error_init_args_noctx = (fake_constraint, value_placeholder, msg_placeholder_nocause)


def test_constrainterror():
    ce = ConstraintError(*error_init_args)
    assert ce.constraint is fake_constraint
    assert ce.value == value_placeholder
    assert ce.caused_by == (cause_placeholder,)
    assert isinstance(ce, ValueError)


def test_constrainterror_repr():
    ce = ConstraintError(*error_init_args)
    assert repr(ce) == (
        f'ConstraintError({fake_constraint!r}, {value_placeholder!r}, '
        f'{msg_placeholder!r}, {ctx_placeholder!r})'
    )
    assert (
        ce.msg
        == str(ce)
        == msg_placeholder.format(
            __value__=value_placeholder,
            __itemized_causes__=f'  - {cause_placeholder}',
        )
    )


def test_constrainterror_repr_noctx():
    ce = ConstraintError(*error_init_args_noctx)
    assert ce.caused_by is None
    assert not ce.context
    assert (
        ce.msg == str(ce) == msg_placeholder_nocause.format(__value__=value_placeholder)
    )


def test_constrainterror_context():
    ce = ConstraintError(
        fake_constraint,
        value_placeholder,
        'bad {algorithm} check digit',
        {'algorithm': 'MOD10'},
    )
    assert str(ce) == 'bad MOD10 check digit'
    assert ce.context['algorithm'] == 'MOD10'


def test_constrainterror_repr_multiexception():
    ce = ConstraintError(
        *error_init_args[:-1],
        {'__caused_by__': (cause_placeholder, RuntimeError('even more cause'))},
    )
    assert (
        ce.msg
        == str(ce)
        == msg_placeholder.format(
            __value__=value_placeholder,
            __itemized_causes__=(f'  - {cause_placeholder}\n  - even more cause'),
        )
    )
