"""sRGB <-> linear light conversion."""

import numpy as np


def srgb_to_linear(value):
    """sRGB 0-255 to linear 0.0-1.0. Accepts scalars or arrays."""
    v = np.asarray(value, dtype=np.float64) / 255.0
    linear = np.where(
        v <= 0.04045,
        v / 12.92,
        np.power((np.maximum(v, 0.04045) + 0.055) / 1.055, 2.4),
    )
    if linear.ndim == 0:
        return float(linear)
    return linear


def linear_to_srgb(value):
    """Linear light to sRGB 0-255, rounded to nearest. Accepts scalars or arrays."""
    v = np.clip(np.asarray(value, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        v <= 0.0031308,
        v * 12.92 * 255 + 0.5,
        (np.power(v, 1 / 2.4) * 1.055 - 0.055) * 255 + 0.5,
    )
    srgb = np.floor(srgb).astype(np.int64)
    if srgb.ndim == 0:
        return int(srgb)
    return srgb


def sign_pow(value, exponent: float):
    """Sign-preserving power, for signed AC coefficients."""
    v = np.asarray(value, dtype=np.float64)
    result = np.copysign(np.power(np.abs(v), exponent), v)
    if result.ndim == 0:
        return float(result)
    return result
