"""Quantization of DC and AC factors into hash field values."""

from typing import Tuple

import numpy as np

from engines.color_space import linear_to_srgb, sign_pow, srgb_to_linear
from utils.constants import AC_QUANT_LEVELS, MAX_AC_QUANT, MAX_AC_SCALE


def quantize_max(ac: np.ndarray) -> Tuple[int, float]:
    """
    Quantize the largest AC magnitude.

    Returns (questioned_max, maximum): the 0-82 value stored in the hash and
    the scale the decoder will reconstruct from it. With no AC terms the
    stored value is 0 and the scale is 1.
    """
    if ac.size == 0:
        return 0, 1.0
    actual_max = float(np.max(np.abs(ac)))
    questioned_max = int(np.clip(np.floor(actual_max * MAX_AC_SCALE - 0.5), 0, MAX_AC_QUANT))
    return questioned_max, dequantize_max(questioned_max)


def dequantize_max(questioned_max: int) -> float:
    return (questioned_max + 1) / MAX_AC_SCALE


def encode_dc(dc: np.ndarray) -> int:
    """Pack a linear DC triple as a 24-bit sRGB integer."""
    r, g, b = (int(c) for c in linear_to_srgb(dc))
    return (r << 16) | (g << 8) | b


def decode_dc(value: int) -> np.ndarray:
    """Unpack a 24-bit sRGB integer into a linear triple."""
    channels = np.array([(value >> 16) & 255, (value >> 8) & 255, value & 255])
    return srgb_to_linear(channels)


def encode_ac(ac: np.ndarray, maximum: float) -> np.ndarray:
    """Quantize (N, 3) AC triples to base-19 packed integers, one per triple."""
    q = np.floor(sign_pow(ac / maximum, 0.5) * 9 + 9.5)
    q = np.clip(q, 0, AC_QUANT_LEVELS - 1).astype(np.int64)
    q = q.reshape(-1, 3)
    return q[:, 0] * AC_QUANT_LEVELS * AC_QUANT_LEVELS + q[:, 1] * AC_QUANT_LEVELS + q[:, 2]


def decode_ac(values: np.ndarray, maximum: float) -> np.ndarray:
    """Unpack base-19 integers into (N, 3) linear AC triples scaled by maximum."""
    values = np.asarray(values, dtype=np.int64)
    q = np.stack([
        values // (AC_QUANT_LEVELS * AC_QUANT_LEVELS),
        (values // AC_QUANT_LEVELS) % AC_QUANT_LEVELS,
        values % AC_QUANT_LEVELS,
    ], axis=-1)
    half = (AC_QUANT_LEVELS - 1) / 2
    return np.asarray(sign_pow((q - half) / half, 2.0)).reshape(-1, 3) * maximum
