import math

import numpy as np
import pytest

from action_space.generic_action_space import GenericActionSpace
from action_space.action_def import HeadingAction


def _make_space():
    return GenericActionSpace([0.5, 1.0], [1.0], 4)


def test_size_is_product_of_dimensions():
    assert _make_space().size == 8
    space = GenericActionSpace([0.1, 0.2, 0.3], [1.0, 2.0], 8)
    assert space.size == 3 * 2 * 8
    assert len(space) == space.size


def test_four_headings_are_the_cardinal_angles():
    space = _make_space()
    assert space.headings == pytest.approx((0.0, math.pi / 2, math.pi, 3 * math.pi / 2))


def test_row_major_ids():
    space = _make_space()

    a0 = space.get_action(0)
    assert isinstance(a0, HeadingAction)
    assert (a0.speed, a0.duration, a0.heading) == (0.5, 1.0, 0.0)

    a2 = space.get_action(2)
    assert (a2.speed, a2.duration) == (0.5, 1.0)
    assert a2.heading == pytest.approx(math.pi)

    # second speed starts right after the first speed's headings
    a4 = space.get_action(4)
    assert (a4.speed, a4.duration) == (1.0, 1.0)
    assert a4.heading == pytest.approx(0.0)


def test_id_encoding_is_invertible():
    space = GenericActionSpace([0.1, 0.2, 0.3], [1.0, 2.0], 4)
    for action_id in range(space.size):
        j, k, l = space.action_indices(action_id)
        assert space.action_id(j, k, l) == action_id
        action = space.get_action(action_id)
        assert action.speed == space.speeds[j]
        assert action.duration == space.durations[k]
        assert action.heading == space.headings[l]

    assert space.action_indices(space.size) is None
    with pytest.raises(IndexError):
        space.action_id(3, 0, 0)


def test_similarity_uses_unit_circle_heading():
    space = _make_space()
    # opposite headings, equal speed and duration
    assert space.action_similarity(0, 2) == pytest.approx(2.0)
    # neighbouring headings across the 0 / 2pi wrap
    assert space.action_similarity(0, 3) == pytest.approx(math.sqrt(2.0))
    assert space.action_similarity(0, 4) == pytest.approx(0.5)


def test_similarity_is_zero_on_diagonal_and_symmetric():
    space = GenericActionSpace([0.5, 1.0], [1.0, 3.0], 8)
    for i in range(space.size):
        assert space.action_similarity(i, i) == 0.0
        for j in range(i + 1, space.size):
            assert space.action_similarity(i, j) == space.action_similarity(j, i)


def test_invalid_ids_report_failure():
    space = _make_space()
    for bad in (-1, space.size, 100, 1.0, None, True):
        assert not space.is_valid_action_id(bad)
        assert space.get_action(bad) is None
        assert space.action_similarity(bad, 0) is None
        assert space.action_similarity(0, bad) is None
    assert space.is_valid_action_id(np.int64(3))


def test_feature_matrix_matches_features():
    space = _make_space()
    matrix = space.feature_matrix()
    assert matrix.shape == (8, 4)
    np.testing.assert_allclose(matrix[1], space.features(1))
    assert space.features(8) is None


def test_gym_space_covers_every_id():
    space = _make_space()
    gym_space = space.gym_space
    assert gym_space.n == space.size
    gym_space.seed(0)
    for _ in range(20):
        assert space.is_valid_action_id(int(gym_space.sample()))


@pytest.mark.parametrize("num_heading", [0, 2, 3, 6, 12, 4.0])
def test_bad_heading_count_is_rejected(num_heading):
    with pytest.raises(ValueError):
        GenericActionSpace([0.5], [1.0], num_heading)


def test_empty_dimensions_are_rejected():
    with pytest.raises(ValueError):
        GenericActionSpace([], [1.0], 4)
    with pytest.raises(ValueError):
        GenericActionSpace([0.5], [], 4)


def test_actions_are_immutable():
    space = _make_space()
    with pytest.raises(AttributeError):
        space.get_action(0).speed = 2.0
    assert space.get_action_space() == tuple(space)


def test_direction_is_the_heading_unit_vector():
    space = _make_space()
    expected = [(1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0)]
    for action_id, (dx, dy) in enumerate(expected):
        direction = space.get_action(action_id).direction
        np.testing.assert_allclose(direction, [dx, dy], atol=1e-12)
        np.testing.assert_allclose(space.features(action_id)[2:], direction)
