"""Image I/O using OpenCV, always in RGBA order."""

import cv2
import numpy as np


def load_image_rgba(path: str) -> np.ndarray:
    """Load any image as (H, W, 4) RGBA uint8."""
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    if img.dtype == np.uint16:
        img = (img >> 8).astype(np.uint8)
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)


def save_image_rgba(image: np.ndarray, path: str) -> None:
    """Save an RGBA image."""
    if not cv2.imwrite(path, cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)):
        raise ValueError(f"Could not write image to {path}")
