import pytest

from algos.climb_stairs import climb_stairs


@pytest.mark.parametrize(
    "num_stairs, expected",
    [
        (3, 3),
        (0, 0),
        (1, 1),
        (2, 2),
        (4, 5),
        (5, 8),
        (-1, 0),
    ],
)
def test_climb_stairs(num_stairs, expected):
    assert climb_stairs(num_stairs) == expected


def test_recurrence_holds():
    for n in range(3, 30):
        assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)