"""Metrics: PSNR and encode/decode timing."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio


def compute_psnr(original_rgb: np.ndarray, placeholder_rgb: np.ndarray) -> float:
    """PSNR of a placeholder against its source, inf when identical."""
    if np.array_equal(original_rgb, placeholder_rgb):
        return float('inf')
    return float(peak_signal_noise_ratio(original_rgb, placeholder_rgb, data_range=255))


class Timer:
    """Simple timer for encode/decode runtime."""
    
    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0
    
    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
