"""Data models for BlurHash parameters and results."""

from .blurhash_params import EncodeParams, DecodeParams
from .component_grid import ComponentGrid
from .placeholder_result import PlaceholderResult

__all__ = ['EncodeParams', 'DecodeParams', 'ComponentGrid', 'PlaceholderResult']
