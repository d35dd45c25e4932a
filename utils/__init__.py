"""Shared utilities."""

from .constants import BASE83_ALPHABET, BYTES_PER_PIXEL, MIN_COMPONENTS, MAX_COMPONENTS
from .metrics import compute_psnr, Timer
from .test_images import generate_solid, generate_gradient, generate_colored_checkerboard
from .image_io import load_image_rgba, save_image_rgba

__all__ = [
    'BASE83_ALPHABET',
    'BYTES_PER_PIXEL',
    'MIN_COMPONENTS',
    'MAX_COMPONENTS',
    'compute_psnr',
    'Timer',
    'generate_solid',
    'generate_gradient',
    'generate_colored_checkerboard',
    'load_image_rgba',
    'save_image_rgba',
]
