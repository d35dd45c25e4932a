"""Placeholder pipeline result with metrics."""

from dataclasses import dataclass
import numpy as np


@dataclass
class PlaceholderResult:
    """Results from the encode/decode placeholder pipeline."""
    
    blurhash: str
    original_image: np.ndarray
    placeholder_image: np.ndarray
    
    components_x: int
    components_y: int
    
    # Quality
    psnr_rgb: float
    
    # Runtime
    encode_time_ms: float
    decode_time_ms: float
    
    @property
    def hash_length(self) -> int:
        return len(self.blurhash)
    
    @property
    def compression_ratio(self) -> float:
        """Raw RGBA source bytes per hash byte."""
        return float(self.original_image.size) / max(len(self.blurhash), 1)
