"""Tests for sRGB/linear conversion."""

import numpy as np
import pytest
from engines.color_space import srgb_to_linear, linear_to_srgb, sign_pow


def test_srgb_to_linear_endpoints():
    """Black maps to 0 and white to 1."""
    assert srgb_to_linear(0) == 0.0
    assert srgb_to_linear(255) == pytest.approx(1.0)


def test_srgb_to_linear_linear_segment():
    """Values at or below 0.04045 use the linear segment."""
    assert srgb_to_linear(10) == pytest.approx(10 / 255 / 12.92)


def test_linear_to_srgb_endpoints_and_clamp():
    """Output is clamped to the byte range."""
    assert linear_to_srgb(0.0) == 0
    assert linear_to_srgb(1.0) == 255
    assert linear_to_srgb(-0.5) == 0
    assert linear_to_srgb(3.0) == 255


def test_scalar_results_are_python_numbers():
    """Scalar input gives float / int output."""
    assert isinstance(srgb_to_linear(128), float)
    assert isinstance(linear_to_srgb(0.5), int)


def test_byte_roundtrip_within_one():
    """Every byte survives sRGB -> linear -> sRGB within quantization tolerance."""
    values = np.arange(256)
    recovered = linear_to_srgb(srgb_to_linear(values))
    assert recovered.shape == (256,)
    assert np.max(np.abs(recovered - values)) <= 1


def test_linear_is_monotonic():
    """Conversion preserves ordering."""
    linear = srgb_to_linear(np.arange(256))
    assert np.all(np.diff(linear) > 0)


def test_sign_pow_preserves_sign():
    """Fractional powers keep the sign of negative inputs."""
    assert sign_pow(4.0, 0.5) == pytest.approx(2.0)
    assert sign_pow(-4.0, 0.5) == pytest.approx(-2.0)
    assert sign_pow(-0.5, 2.0) == pytest.approx(-0.25)
    assert sign_pow(0.0, 0.5) == 0.0


def test_sign_pow_arrays():
    """Arrays are handled element-wise."""
    result = sign_pow(np.array([-9.0, 0.0, 9.0]), 0.5)
    assert np.allclose(result, [-3.0, 0.0, 3.0])
