"""Tests for the cosine transform."""

import numpy as np
from engines.transform import cosine_basis, forward_transform, inverse_transform


def test_cosine_basis_shape_and_values():
    """basis[k, n] = cos(pi * k * n / size)."""
    basis = cosine_basis(3, 8)
    assert basis.shape == (3, 8)
    assert np.allclose(basis[0], 1.0)
    assert np.isclose(basis[1, 4], 0.0, atol=1e-12)
    assert np.isclose(basis[2, 4], -1.0)


def test_constant_image_terms():
    """A flat image keeps its mean in DC and leaks 2c/N into odd frequencies only."""
    c = 0.25
    height, width = 8, 6
    image = np.full((height, width, 3), c)
    factors = forward_transform(image, 4, 3)
    assert factors.shape == (3, 4, 3)
    assert np.allclose(factors[0, 0], c)
    # sum of cos(pi * k * n / N) over n is 1 for odd k, 0 for even k
    assert np.allclose(factors[0, 1], 2 * c / width)
    assert np.allclose(factors[0, 3], 2 * c / width)
    assert np.allclose(factors[1, 0], 2 * c / height)
    assert np.allclose(factors[1, 1], 2 * c / (width * height))
    assert np.allclose(factors[0, 2], 0.0, atol=1e-12)
    assert np.allclose(factors[2], 0.0, atol=1e-12)


def test_ac_terms_use_double_normalization():
    """A pure horizontal cosine is recovered by the factor 2 AC scaling."""
    width, height = 16, 4
    column = 0.1 * np.cos(np.pi * np.arange(width) / width)
    image = np.repeat(np.tile(column, (height, 1))[:, :, None], 3, axis=2)
    factors = forward_transform(image, 2, 1)
    # sum(cos^2) over one half period is width / 2
    assert np.allclose(factors[0, 1], 0.1)


def test_inverse_of_dc_only_is_flat():
    """A lone DC factor reconstructs to a constant image."""
    factors = np.zeros((3, 4, 3))
    factors[0, 0] = [0.2, 0.4, 0.6]
    image = inverse_transform(factors, 5, 7)
    assert image.shape == (7, 5, 3)
    assert np.allclose(image, [0.2, 0.4, 0.6])


def test_inverse_empty_output():
    """Zero-sized outputs are allowed."""
    factors = np.zeros((1, 1, 3))
    assert inverse_transform(factors, 0, 4).shape == (4, 0, 3)
