import pytest

from minnowtcp.wrapping_integers import Wrap32

UINT32_MAX = (1 << 32) - 1
INT32_MAX = (1 << 31) - 1


@pytest.mark.parametrize(
    "value, zero_point, checkpoint, expected",
    [
        (1, 0, 0, 1),
        (1, 0, UINT32_MAX, (1 << 32) + 1),
        (UINT32_MAX - 1, 0, 3 * (1 << 32), 3 * (1 << 32) - 2),
        (UINT32_MAX - 10, 0, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 10, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 0, 0, UINT32_MAX),
        (16, 16, 0, 0),
        (15, 16, 0, UINT32_MAX),
        (0, INT32_MAX, 0, INT32_MAX + 2),
        (UINT32_MAX, INT32_MAX, 0, 1 << 31),
        (UINT32_MAX, 1 << 31, 0, UINT32_MAX >> 1),
        (0, 1, 1, UINT32_MAX),
    ],
)
def test_unwrap(value, zero_point, checkpoint, expected):
    assert Wrap32(value).unwrap(Wrap32(zero_point), checkpoint) == expected


def test_wrap_reduces_modulo_2_32():
    assert Wrap32.wrap(3 * (1 << 32), Wrap32(0)) == Wrap32(0)
    assert Wrap32.wrap(3 * (1 << 32) + 17, Wrap32(15)) == Wrap32(32)
    assert Wrap32.wrap(7 * (1 << 32) - 2, Wrap32(15)) == Wrap32(13)


def test_addition_wraps():
    assert Wrap32(UINT32_MAX) + 1 == Wrap32(0)
    assert Wrap32(UINT32_MAX - 10) + 11 == Wrap32(0)


def test_constructor_masks_to_32_bits():
    assert Wrap32((1 << 32) + 5) == Wrap32(5)


def test_equality_with_other_types():
    assert (Wrap32(3) == 3) is False
    assert Wrap32(3) != Wrap32(4)


@pytest.mark.parametrize(
    "n, isn",
    [(0, 0), (12345, 987654), (1 << 33, UINT32_MAX), ((5 << 32) + 99, 1 << 31)],
)
def test_wrap_unwrap_round_trip(n, isn):
    zero_point = Wrap32(isn)
    assert Wrap32.wrap(n, zero_point).unwrap(zero_point, n) == n


def test_hash_matches_equality():
    assert len({Wrap32(7), Wrap32(7 + (1 << 32))}) == 1