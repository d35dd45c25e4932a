"""Synthetic RGBA test images for placeholder demos."""

import numpy as np


def generate_solid(width: int = 8, height: int = 8, color=(255, 0, 0)) -> np.ndarray:
    """Uniform opaque color - every AC term is zero."""
    img = np.empty((height, width, 4), dtype=np.uint8)
    img[:, :, :3] = color
    img[:, :, 3] = 255
    return img


def generate_gradient(width: int = 64, height: int = 64) -> np.ndarray:
    """Smooth diagonal gradient - dominated by the lowest frequencies."""
    y, x = np.mgrid[0:height, 0:width]
    t = (x + y) / max(width + height - 2, 1)
    img = np.empty((height, width, 4), dtype=np.float64)
    img[:, :, 0] = 40 + t * 180
    img[:, :, 1] = 60 + t * 140
    img[:, :, 2] = 120 + t * 100
    img[:, :, 3] = 255
    return np.clip(img, 0, 255).astype(np.uint8)


def generate_colored_checkerboard(size: int = 64, block_size: int = 16) -> np.ndarray:
    """High-contrast checkerboard - pushes AC terms toward the quantization limits."""
    img = np.zeros((size, size, 4), dtype=np.uint8)
    img[:, :, 3] = 255

    for i in range(0, size, block_size):
        for j in range(0, size, block_size):
            block_idx = (i // block_size + j // block_size) % 2
            if block_idx == 0:
                img[i:i+block_size, j:j+block_size, :3] = [30, 30, 30]
            else:
                img[i:i+block_size, j:j+block_size, :3] = [220, 220, 220]

    return img


def generate_chroma_stripes(width: int = 64, height: int = 32) -> np.ndarray:
    """Saturated vertical color bars - horizontal variation only."""
    img = np.zeros((height, width, 4), dtype=np.uint8)
    img[:, :, 3] = 255

    colors = [
        [180, 40, 40],    # Red
        [40, 160, 40],    # Green
        [40, 80, 180],    # Blue
        [180, 180, 40],   # Yellow
    ]

    stripe_width = max(width // len(colors), 1)

    for i, color in enumerate(colors):
        x_start = i * stripe_width
        x_end = (i + 1) * stripe_width if i < len(colors) - 1 else width
        img[:, x_start:x_end, :3] = color

    return img


def generate_demo_image(key: str) -> np.ndarray | None:
    """Generate demo image by key."""
    generators = {
        "solid": lambda: generate_solid(32, 32, (90, 140, 200)),
        "gradient": lambda: generate_gradient(64, 64),
        "checkerboard": lambda: generate_colored_checkerboard(64),
        "chroma_stripes": lambda: generate_chroma_stripes(64, 32),
    }

    return generators[key]() if key in generators else None
