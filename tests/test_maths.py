import math

import numpy as np
import pytest

from candela.maths import (
    cosine_hemisphere,
    fibonacci_lattice,
    get_forward_vector,
    get_position,
    get_right_vector,
    get_rotation_matrix,
    get_up_vector,
    sample_hemisphere,
    set_position,
)


def _rotation_y(degrees):
    a = math.radians(degrees)
    c, s = math.cos(a), math.sin(a)
    return np.array(
        [[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1]], dtype=float
    )


def _transform():
    model = _rotation_y(30.0) @ np.diag([2.0, 3.0, 4.0, 1.0])
    model[:3, 3] = [1.0, 2.0, 3.0]
    return model


def test_rotation_matrix_strips_scale_and_translation():
    result = get_rotation_matrix(_transform())
    expected = _rotation_y(30.0)
    assert np.allclose(result[:3, :3], expected[:3, :3])
    assert np.allclose(result[:3, 3], 0.0)
    assert result[3, 3] == 1.0


def test_axis_vectors_of_identity():
    identity = np.identity(4)
    assert np.allclose(get_forward_vector(identity), [0.0, 0.0, -1.0])
    assert np.allclose(get_right_vector(identity), [1.0, 0.0, 0.0])
    assert np.allclose(get_up_vector(identity), [0.0, 1.0, 0.0])


def test_axis_vectors_follow_rotation():
    model = _transform()
    rotation = _rotation_y(30.0)
    assert np.allclose(get_forward_vector(model), -rotation[:3, 2])
    assert np.allclose(get_right_vector(model), rotation[:3, 0])
    assert np.allclose(get_up_vector(model), rotation[:3, 1])


def test_get_position_reads_translation():
    assert np.allclose(get_position(_transform()), [1.0, 2.0, 3.0])


def test_set_position_round_trip_and_copy():
    model = _transform()
    model[3, 3] = 2.0
    moved = set_position(model, [4.0, -5.0, 6.0])
    assert np.allclose(get_position(moved), [4.0, -5.0, 6.0])
    assert np.allclose(model[:3, 3], [1.0, 2.0, 3.0])
    assert np.allclose(moved[:3, :3], model[:3, :3])


@pytest.mark.parametrize("iteration", [0, 1, 7, 63])
def test_fibonacci_lattice_in_unit_square(iteration):
    x, y = fibonacci_lattice(iteration, 64)
    assert x == pytest.approx((iteration + 0.5) / 64)
    assert 0.0 <= y < 1.0


def test_fibonacci_lattice_first_point():
    assert fibonacci_lattice(0, 4) == (0.125, 0.0)


@pytest.mark.parametrize("hash_value", [(0.1, 0.2), (0.5, 0.9), (0.99, 0.0)])
def test_sample_hemisphere_is_unit_and_above_surface(hash_value):
    normal = np.array([0.0, 0.0, 1.0])
    direction = sample_hemisphere(normal, hash_value)
    assert np.linalg.norm(direction) == pytest.approx(1.0)
    assert float(direction @ normal) >= 0.0


def test_sample_hemisphere_top_returns_normal():
    normal = np.array([1.0, 0.0, 0.0])
    assert np.allclose(sample_hemisphere(normal, (1.0, 0.3)), normal)


@pytest.mark.parametrize("hash_value", [(0.0, 0.5), (0.3, 0.3), (0.8, 0.75)])
def test_cosine_hemisphere_is_unit_and_above_surface(hash_value):
    normal = np.array([0.0, 1.0, 0.0])
    direction = cosine_hemisphere(normal, hash_value)
    assert np.linalg.norm(direction) == pytest.approx(1.0)
    assert float(direction @ normal) >= 0.0


def test_cosine_hemisphere_zero_radius_returns_normal():
    normal = np.array([0.0, 0.0, 1.0])
    assert np.allclose(cosine_hemisphere(normal, (0.0, 0.42)), normal)