"""Encode/decode placeholder pipeline."""

import logging
from typing import Optional

import numpy as np

from models.blurhash_params import EncodeParams, DecodeParams
from models.placeholder_result import PlaceholderResult
from engines.encoder import encode_image
from engines.decoder import decode_image
from utils.metrics import compute_psnr, Timer

logger = logging.getLogger(__name__)


def make_placeholder(
    image_rgba: np.ndarray,
    params: EncodeParams,
    decode_params: Optional[DecodeParams] = None
) -> PlaceholderResult:
    """Encode an image to a BlurHash and decode it back at the source size."""
    timer = Timer()
    height, width = image_rgba.shape[:2]
    
    if decode_params is None:
        decode_params = DecodeParams(width=width, height=height)
    
    # === ENCODING ===
    blurhash = timer.measure_encode(
        encode_image, image_rgba, params.components_x, params.components_y
    )
    
    # === DECODING ===
    placeholder = timer.measure_decode(
        decode_image, blurhash, decode_params.width, decode_params.height, decode_params.punch
    )
    
    # === METRICS ===
    # PSNR only makes sense when the placeholder matches the source size
    if placeholder.shape[:2] == (height, width):
        psnr_rgb = compute_psnr(image_rgba[:, :, :3], placeholder[:, :, :3])
    else:
        psnr_rgb = float('nan')
    
    logger.debug("Placeholder %s: PSNR %.2f dB", blurhash, psnr_rgb)
    
    return PlaceholderResult(
        blurhash=blurhash,
        original_image=image_rgba,
        placeholder_image=placeholder,
        components_x=params.components_x,
        components_y=params.components_y,
        psnr_rgb=psnr_rgb,
        encode_time_ms=timer.encode_time_ms,
        decode_time_ms=timer.decode_time_ms,
    )
