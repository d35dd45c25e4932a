"""Cosine transform over a small grid of frequency components."""

import numpy as np


def cosine_basis(count: int, size: int) -> np.ndarray:
    """basis[k, n] = cos(pi * k * n / size), shape (count, size)."""
    k = np.arange(count, dtype=np.float64)[:, None]
    n = np.arange(size, dtype=np.float64)[None, :]
    return np.cos(np.pi * k * n / size)


def forward_transform(linear_rgb: np.ndarray, components_x: int, components_y: int) -> np.ndarray:
    """
    Basis-weighted averages of a linear (H, W, 3) image.

    Returns factors of shape (components_y, components_x, 3). The DC term is
    the plain mean; AC terms are scaled by 2.
    """
    height, width = linear_rgb.shape[:2]
    basis_x = cosine_basis(components_x, width)
    basis_y = cosine_basis(components_y, height)

    factors = np.einsum('jy,ix,yxc->jic', basis_y, basis_x, linear_rgb)

    scale = np.full((components_y, components_x, 1), 2.0 / (width * height))
    scale[0, 0, 0] = 1.0 / (width * height)
    return factors * scale


def inverse_transform(factors: np.ndarray, width: int, height: int) -> np.ndarray:
    """Sum the (cy, cx, 3) factors at every pixel, giving a linear (H, W, 3) image."""
    components_y, components_x = factors.shape[:2]
    basis_x = cosine_basis(components_x, width)
    basis_y = cosine_basis(components_y, height)
    return np.einsum('jy,ix,jic->yxc', basis_y, basis_x, factors)
