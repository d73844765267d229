import pytest

from cppstructs.vec2d import Vec2d


def test_default_is_origin():
    assert Vec2d() == Vec2d(0, 0)
    assert not Vec2d()


def test_add_and_subtract_round_trip():
    a, b = Vec2d(3, -7), Vec2d(11, 4)
    assert (a + b) - b == a
    assert a + b == b + a


def test_pinned_sum():
    assert Vec2d(1, 2) + Vec2d(3, 4) == Vec2d(4, 6)


def test_scalar_multiplication():
    v = Vec2d(2, -3)
    assert v * 1 == v
    assert v * -1 == Vec2d(0, 0) - v
    assert v * 2 == v + v


def test_vector_multiplication_is_componentwise():
    v = Vec2d(5, 6)
    assert v * Vec2d(1, 1) == v
    assert v * Vec2d(0, 1) == Vec2d(0, 6)


def test_truthiness():
    vectors = [Vec2d(1, 1), Vec2d(0, 1), Vec2d(1, 0), Vec2d(-2, 3)]
    assert [bool(v) for v in vectors] == [True, False, False, True]


@pytest.mark.parametrize(
    "pos, expected",
    [
        (Vec2d(0, 0), True),
        (Vec2d(2, 2), True),
        (Vec2d(3, 0), False),
        (Vec2d(0, 3), False),
        (Vec2d(-1, 1), False),
    ],
)
def test_within(pos, expected):
    assert pos.within(Vec2d(3, 3)) is expected


def test_hashable_and_equal():
    assert len({Vec2d(1, 2), Vec2d(1, 2), Vec2d(2, 1)}) == 2


def test_unsupported_operand_raises():
    with pytest.raises(TypeError):
        Vec2d(1, 1) + 3