"""Tests for the AffineMap value type."""

import math

import numpy as np
import pytest

from ifsfractal.model.affine_map import AffineMap


def test_zero_map_defaults():
    """A default map is zero-valued."""
    m = AffineMap()

    assert m.center == (0.0, 0.0)
    assert m.size == (0.0, 0.0)
    assert m.angle == 0.0
    assert m == AffineMap.zero()


def test_to_matrix_is_deterministic():
    """Identical fields give bit-identical matrices."""
    a = AffineMap(center=(0.25, -0.4), size=(0.3, 0.7), angle=1.234)
    b = AffineMap(center=(0.25, -0.4), size=(0.3, 0.7), angle=1.234)

    first = a.to_matrix()
    assert first.tobytes() == a.to_matrix().tobytes()
    assert first.tobytes() == b.to_matrix().tobytes()


def test_to_matrix_returns_fresh_array():
    """Mutating a returned matrix does not leak into the next call."""
    m = AffineMap(center=(0.5, 0.0), size=(0.5, 0.5))

    mat = m.to_matrix()
    mat[0, 0] = 99.0

    assert m.to_matrix()[0, 0] == 0.5


def test_identity_matrix():
    """The identity map gives the identity matrix."""
    np.testing.assert_array_equal(AffineMap.identity().to_matrix(), np.eye(3))


def test_matrix_layout():
    """Matrix is T(center) · S(size) · R(angle) in homogeneous form."""
    m = AffineMap(center=(0.1, 0.2), size=(0.5, 0.25), angle=0.3)
    c, s = math.cos(0.3), math.sin(0.3)

    expected = np.array([
        [0.5 * c, -0.5 * s, 0.1],
        [0.25 * s, 0.25 * c, 0.2],
        [0.0, 0.0, 1.0],
    ])
    np.testing.assert_allclose(m.to_matrix(), expected)


def test_rotation_is_applied_before_scale():
    """Rotate first, then scale: (1, 0) -> (0, 1) -> (0, 1)."""
    m = AffineMap(center=(0.0, 0.0), size=(2.0, 1.0), angle=math.pi / 2)

    out = m.apply([(1.0, 0.0)])

    np.testing.assert_allclose(out, [[0.0, 1.0]], atol=1e-12)


def test_translation_is_applied_last():
    """The center is added after scaling."""
    m = AffineMap(center=(0.5, 0.0), size=(0.5, 0.5))

    out = m.apply([(0.0, 0.0), (1.0, 1.0)])

    np.testing.assert_allclose(out, [[0.5, 0.0], [1.0, 0.5]])


def test_zero_size_collapses_to_center():
    """A zero-size map sends every point to its center."""
    m = AffineMap(center=(0.3, -0.2), size=(0.0, 0.0), angle=0.7)

    out = m.apply([(1.0, 2.0), (-5.0, 3.0)])

    np.testing.assert_allclose(out, [[0.3, -0.2], [0.3, -0.2]])


def test_apply_rejects_bad_shape():
    """apply() wants (N, 2) input."""
    with pytest.raises(ValueError):
        AffineMap.identity().apply([[1.0, 2.0, 3.0]])


def test_apply_empty():
    assert AffineMap.identity().apply([]).shape == (0, 2)


def test_from_degrees():
    m = AffineMap.from_degrees(center=(0.0, 0.0), size=(1.0, 1.0), angle_deg=180.0)
    assert m.angle == pytest.approx(math.pi)


def test_value_semantics():
    """Maps are hashable, comparable and immutable."""
    a = AffineMap(center=[0.1, 0.2], size=np.array([0.5, 0.5]), angle=0)
    b = AffineMap(center=(0.1, 0.2), size=(0.5, 0.5), angle=0.0)

    assert a == b
    assert hash(a) == hash(b)
    with pytest.raises(AttributeError):
        a.angle = 1.0  # type: ignore[misc]


def test_with_helpers_return_copies():
    m = AffineMap(center=(0.1, 0.2), size=(0.5, 0.5), angle=0.1)

    moved = m.with_center(0.9, 0.9)

    assert moved.center == (0.9, 0.9)
    assert moved.size == m.size
    assert m.center == (0.1, 0.2)
    assert m.with_size(0.2, 0.3).size == (0.2, 0.3)
    assert m.with_angle(2.0).angle == 2.0


@pytest.mark.parametrize(
    "size, expected",
    [
        ((0.5, 0.5), True),
        ((0.0, 0.5), False),
        ((1.0, 0.5), False),
        ((-0.5, 0.5), True),
        ((1.5, 0.2), False),
    ],
)
def test_is_contraction(size, expected):
    assert AffineMap(size=size).is_contraction is expected
