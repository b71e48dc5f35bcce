import math

import pytest

from action_space.utils import angle_normalization, euclidean_distance, linspace


@pytest.mark.parametrize("angle, expected", [
    (0.0, 0.0),
    (math.pi / 2, math.pi / 2),
    (3 * math.pi / 2, -math.pi / 2),
    (2 * math.pi, 0.0),
    (-3 * math.pi / 2, math.pi / 2),
    (math.pi, -math.pi),
])
def test_angle_normalization(angle, expected):
    assert angle_normalization(angle) == pytest.approx(expected, abs=1e-12)


def test_angle_normalization_range():
    for k in range(-20, 21):
        wrapped = angle_normalization(k * 0.7)
        assert -math.pi <= wrapped < math.pi
        assert math.cos(wrapped) == pytest.approx(math.cos(k * 0.7))


def test_linspace_includes_both_ends():
    assert linspace(-10.0, 10.0, 5) == pytest.approx([-10.0, -5.0, 0.0, 5.0, 10.0])
    assert linspace(0.0, 1.0, 1) == [0.0]


def test_euclidean_distance():
    assert euclidean_distance([0.0, 3.0], [4.0, 0.0]) == pytest.approx(5.0)
    with pytest.raises(ValueError):
        euclidean_distance([0.0], [0.0, 1.0])
