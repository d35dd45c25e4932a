"""BlurHash engines - pure computation, no I/O."""

from .errors import (
    BlurHashError, EncodeError, RangeError, SizeMismatchError,
    DecodeError, LengthError, FormatError, AlphabetError,
)
from .color_space import srgb_to_linear, linear_to_srgb, sign_pow
from .transform import cosine_basis, forward_transform, inverse_transform
from .quantizer import quantize_max, encode_dc, decode_dc, encode_ac, decode_ac
from .validator import validate, components, is_valid
from .encoder import encode, encode_image
from .decoder import decode, decode_image

__all__ = [
    'BlurHashError',
    'EncodeError',
    'RangeError',
    'SizeMismatchError',
    'DecodeError',
    'LengthError',
    'FormatError',
    'AlphabetError',
    'srgb_to_linear',
    'linear_to_srgb',
    'sign_pow',
    'cosine_basis',
    'forward_transform',
    'inverse_transform',
    'quantize_max',
    'encode_dc',
    'decode_dc',
    'encode_ac',
    'decode_ac',
    'validate',
    'components',
    'is_valid',
    'encode',
    'encode_image',
    'decode',
    'decode_image',
]
