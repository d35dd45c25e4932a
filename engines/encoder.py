"""Image -> BlurHash encoding."""

import logging

import numpy as np

from engines import base83
from engines.color_space import srgb_to_linear
from engines.errors import RangeError, SizeMismatchError
from engines.quantizer import encode_ac, encode_dc, quantize_max
from engines.transform import forward_transform
from models.component_grid import ComponentGrid
from utils.constants import (
    AC_LENGTH, BYTES_PER_PIXEL, DC_LENGTH, MAX_COMPONENTS, MAX_VALUE_LENGTH,
    MIN_COMPONENTS, SIZE_FLAG_LENGTH,
)

logger = logging.getLogger(__name__)


def _as_pixel_array(pixels) -> np.ndarray:
    if isinstance(pixels, np.ndarray):
        return pixels.astype(np.uint8, copy=False).reshape(-1)
    return np.frombuffer(memoryview(pixels).cast('B'), dtype=np.uint8)


def compute_components(pixels, width: int, height: int,
                       components_x: int, components_y: int) -> ComponentGrid:
    """Validate the input and run the forward cosine transform."""
    if not (MIN_COMPONENTS <= components_x <= MAX_COMPONENTS
            and MIN_COMPONENTS <= components_y <= MAX_COMPONENTS):
        raise RangeError(components_x, components_y)

    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

    flat = _as_pixel_array(pixels)
    expected = width * height * BYTES_PER_PIXEL
    if flat.size != expected:
        raise SizeMismatchError(expected, flat.size)

    rgba = flat.reshape(height, width, BYTES_PER_PIXEL)
    linear = srgb_to_linear(rgba[:, :, :3])
    return ComponentGrid(forward_transform(linear, components_x, components_y))


def encode(pixels, width: int, height: int, components_x: int = 4, components_y: int = 3) -> str:
    """
    Encode a row-major RGBA buffer to a BlurHash string.

    `pixels` may be any bytes-like object or a uint8 numpy array holding
    width * height * 4 bytes. Alpha is ignored.

    Raises RangeError if a component count is outside [1, 9] and
    SizeMismatchError if the buffer length does not match the dimensions.
    """
    grid = compute_components(pixels, width, height, components_x, components_y)

    questioned_max, maximum = quantize_max(grid.ac)
    logger.debug(
        "Encoding %dx%d image with %dx%d components, max AC %d",
        width, height, components_x, components_y, questioned_max,
    )

    size_flag = (components_x - 1) + (components_y - 1) * 9
    parts = [
        base83.encode(size_flag, SIZE_FLAG_LENGTH),
        base83.encode(questioned_max, MAX_VALUE_LENGTH),
        base83.encode(encode_dc(grid.dc), DC_LENGTH),
    ]
    parts.extend(base83.encode(value, AC_LENGTH) for value in encode_ac(grid.ac, maximum))
    return "".join(parts)


def encode_image(image: np.ndarray, components_x: int = 4, components_y: int = 3) -> str:
    """Encode an (H, W, 3) or (H, W, 4) uint8 image."""
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) image, got shape {image.shape}")
    height, width = image.shape[:2]
    if image.shape[2] == 3:
        alpha = np.full((height, width, 1), 255, dtype=np.uint8)
        image = np.concatenate([image.astype(np.uint8), alpha], axis=2)
    return encode(np.ascontiguousarray(image, dtype=np.uint8), width, height, components_x, components_y)
