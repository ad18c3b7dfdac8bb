import itertools

import pytest

from steep.types import Behaviour, HookKind, combine


NORMAL, SKIP, ONLY = Behaviour.NORMAL, Behaviour.SKIP, Behaviour.ONLY


def test_combine_table():
    assert combine(NORMAL, NORMAL) is NORMAL
    assert combine(NORMAL, ONLY) is ONLY
    assert combine(ONLY, NORMAL) is ONLY
    assert combine(ONLY, ONLY) is ONLY
    assert combine(SKIP, ONLY) is SKIP
    assert combine(ONLY, SKIP) is SKIP


@pytest.mark.parametrize("other", list(Behaviour))
def test_skip_is_absorbing_in_either_position(other):
    assert combine(SKIP, other) is SKIP
    assert combine(other, SKIP) is SKIP


def test_combine_folds_the_same_regardless_of_grouping():
    for a, b, c in itertools.product(Behaviour, repeat=3):
        assert a.combine(b).combine(c) is a.combine(b.combine(c))


def test_from_flags():
    assert Behaviour.from_flags() is NORMAL
    assert Behaviour.from_flags(skip=True) is SKIP
    assert Behaviour.from_flags(only=True) is ONLY
    with pytest.raises(ValueError, match="both skip and only"):
        Behaviour.from_flags(skip=True, only=True)


def test_per_test_hook_kinds():
    assert HookKind.BEFORE_EACH.per_test
    assert HookKind.AFTER_EACH.per_test
    assert not HookKind.BEFORE.per_test
    assert not HookKind.AFTER.per_test
