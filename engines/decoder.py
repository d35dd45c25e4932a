"""BlurHash -> image decoding."""

import logging
from typing import Optional

import numpy as np

from engines import base83
from engines.color_space import linear_to_srgb
from engines.quantizer import decode_ac, decode_dc, dequantize_max
from engines.transform import inverse_transform
from engines.validator import validate, components
from models.component_grid import ComponentGrid
from utils.constants import AC_LENGTH, DC_LENGTH, MIN_HASH_LENGTH, SIZE_FLAG_LENGTH

logger = logging.getLogger(__name__)


def parse_components(blurhash: str, punch: Optional[float] = None) -> ComponentGrid:
    """
    Validate a hash and dequantize its DC and AC fields.

    AC terms are scaled by the decoded maximum times `punch`.
    """
    validate(blurhash)
    components_x, components_y = components(blurhash)
    punch = 1.0 if punch is None else float(punch)

    questioned_max = base83.decode(blurhash[SIZE_FLAG_LENGTH], offset=SIZE_FLAG_LENGTH)
    maximum = dequantize_max(questioned_max)

    dc = decode_dc(base83.decode(blurhash[MIN_HASH_LENGTH - DC_LENGTH:MIN_HASH_LENGTH],
                                 offset=MIN_HASH_LENGTH - DC_LENGTH))
    ac_values = [
        base83.decode(blurhash[start:start + AC_LENGTH], offset=start)
        for start in range(MIN_HASH_LENGTH, len(blurhash), AC_LENGTH)
    ]
    ac = decode_ac(np.array(ac_values, dtype=np.int64), maximum * punch)

    logger.debug(
        "Decoded %dx%d component hash, max AC %d, punch %s",
        components_x, components_y, questioned_max, punch,
    )
    return ComponentGrid.from_terms(dc, ac, components_x, components_y)


def decode_image(blurhash: str, width: int, height: int,
                 punch: Optional[float] = None, linear: bool = False) -> np.ndarray:
    """
    Decode a hash to an image of the given size.

    Returns an (H, W, 4) uint8 RGBA array with opaque alpha, or the
    (H, W, 3) float64 linear-light reconstruction when `linear` is set.
    The hash is fully parsed before any pixel is reconstructed.
    """
    if width < 0 or height < 0:
        raise ValueError(f"Output size must be non-negative, got {width}x{height}")

    grid = parse_components(blurhash, punch)
    linear_rgb = inverse_transform(grid.factors, width, height)
    if linear:
        return linear_rgb

    rgba = np.full((height, width, 4), 255, dtype=np.uint8)
    rgba[:, :, :3] = linear_to_srgb(linear_rgb).astype(np.uint8)
    return rgba


def decode(blurhash: str, width: int, height: int, punch: Optional[float] = None) -> bytes:
    """Decode a hash to a row-major RGBA buffer of width * height * 4 bytes."""
    return decode_image(blurhash, width, height, punch).tobytes()
