import pytest

from registry_lib.services.bindings import Factory, Value, binding_for, is_scalar
from registry_lib.services.errors import InvalidRegistrationError


def test_binding_for_classifies_callables_and_objects():
    def zero():
        return 1

    def one(lookup):
        return lookup

    b_zero = binding_for('z', zero)
    b_one = binding_for('o', one)
    b_obj = binding_for('v', {'a': 1})

    assert isinstance(b_zero, Factory) and b_zero.takes_lookup is False
    assert isinstance(b_one, Factory) and b_one.takes_lookup is True
    assert b_obj == Value({'a': 1})


def test_binding_for_keeps_explicit_variants():
    v = Value(5)
    assert binding_for('x', v) is v

    f = Factory(lambda: 1, takes_lookup=False)
    assert binding_for('x', f) is f


def test_unclassified_factory_gets_arity_detected():
    b = binding_for('x', Factory(lambda *args: args))
    assert b.takes_lookup is True
    assert b('handle') == ('handle',)


def test_factory_with_non_callable_rejected():
    with pytest.raises(InvalidRegistrationError):
        binding_for('x', Factory('not callable'))


def test_value_ignores_lookup():
    sentinel = object()
    assert Value(sentinel)('handle') is sentinel


def test_is_scalar():
    assert is_scalar(None)
    assert is_scalar(False)
    assert is_scalar(7)
    assert is_scalar(1.5)
    assert not is_scalar('text')
    assert not is_scalar([])
    assert not is_scalar(object())
