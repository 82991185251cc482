import pytest

from violetkit.optional import BadOptionalAccess, Optional, nothing, some


def test_default_construction():
    opt = Optional()
    assert opt.has_value() is False
    assert bool(opt) is False


def test_nothing_value():
    opt = nothing()
    assert opt.has_value() is False


def test_in_place_construction():
    opt = some("32")
    assert opt.has_value()
    assert opt == Optional("32")


def test_copy_construction():
    aa = Optional(42)
    bb = Optional(aa)
    assert bb.has_value()
    assert bb == some(42)
    assert aa.has_value()


def test_move_construction_via_take():
    aa = Optional(42)
    bb = aa.take()
    assert bb.has_value()
    assert bb.value() == 42
    assert aa.has_value() is False


def test_copy_from_empty_is_empty():
    bb = Optional(Optional())
    assert bb.has_value() is False


def test_assignment_from_nothing_resets():
    opt = Optional(42)
    opt.reset()
    assert opt.has_value() is False


def test_copy_assignment():
    aa = Optional(42)
    bb = Optional(aa)
    assert bb.value() == 42


def test_assignment_from_value():
    bb = Optional()
    bb.replace(69)
    assert bb.has_value()
    assert bb.value() == 69


def test_reset_should_work():
    opt = Optional(123)
    opt.reset()
    assert opt.has_value() is False


def test_replace_should_work():
    opt = Optional(10)
    ref = opt.replace(20)
    assert opt.has_value()
    assert ref == 20
    assert opt.value() == 20


def test_take_should_work():
    opt = Optional("hi")
    taken = opt.take()
    assert taken.has_value()
    assert taken.value() == "hi"
    assert opt.has_value() is False


def test_take_from_empty():
    opt = Optional()
    taken = opt.take()
    assert taken.has_value() is False


def test_map_transforms_value():
    opt = Optional(5)
    result = opt.map(lambda xy: xy * 2)
    assert result.has_value()
    assert result.value() == 10

    empty = Optional()
    mapped = empty.map(lambda xy: xy * 2)
    assert mapped.has_value() is False


def test_inspect_runs_side_effects():
    opt = Optional(5)
    seen = []
    returned = opt.inspect(seen.append)
    assert seen == [5]
    assert returned == some(5)


def test_inspect_on_empty_does_not_call():
    seen = []
    Optional().inspect(seen.append)
    assert seen == []


def test_value_on_empty_raises():
    with pytest.raises(BadOptionalAccess):
        Optional().value()


def test_value_or():
    assert Optional(3).value_or(9) == 3
    assert Optional().value_or(9) == 9


def test_has_value_and():
    assert Optional(4).has_value_and(lambda x: x > 3) is True
    assert Optional(2).has_value_and(lambda x: x > 3) is False
    assert Optional().has_value_and(lambda x: True) is False


def test_none_is_a_value():
    opt = Optional(None)
    assert opt.has_value()
    assert opt.value() is None


def test_equality():
    assert Optional() == nothing()
    assert some(1) != some(2)
    assert some(1) != nothing()


def test_str():
    assert str(Optional()) == "«no value»"
    assert str(Optional(42)) == "42"
    assert str(some("hi")) == "hi"