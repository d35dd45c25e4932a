"""Structural validation of BlurHash strings."""

from typing import Tuple

from engines import base83
from engines.errors import FormatError, LengthError
from utils.constants import AC_LENGTH, DC_LENGTH, MAX_COMPONENTS, MIN_HASH_LENGTH, SIZE_FLAG_LENGTH


def components(blurhash: str) -> Tuple[int, int]:
    """Return the (components_x, components_y) a hash declares in its size flag."""
    if len(blurhash) < MIN_HASH_LENGTH:
        raise LengthError(
            f"BlurHash must be at least {MIN_HASH_LENGTH} characters long, got {len(blurhash)}"
        )
    size_flag = base83.decode(blurhash[:SIZE_FLAG_LENGTH])
    components_y = size_flag // 9 + 1
    components_x = size_flag % 9 + 1
    if components_y > MAX_COMPONENTS:
        raise FormatError(f"Size flag {size_flag} declares more than {MAX_COMPONENTS} rows")
    return components_x, components_y


def expected_length(components_x: int, components_y: int) -> int:
    return DC_LENGTH + components_x * components_y * AC_LENGTH


def validate(blurhash: str) -> None:
    """
    Check the hash length against the grid size it declares.

    Only the size flag is decoded; raises LengthError for hashes shorter
    than 6 characters and FormatError (or AlphabetError, for a bad size
    flag character) when the length does not match.
    """
    components_x, components_y = components(blurhash)
    expected = expected_length(components_x, components_y)
    if len(blurhash) != expected:
        raise FormatError(
            f"BlurHash declares a {components_x}x{components_y} grid and must be "
            f"{expected} characters long, got {len(blurhash)}"
        )


def is_valid(blurhash: str) -> bool:
    try:
        validate(blurhash)
    except (LengthError, FormatError):
        return False
    return True
