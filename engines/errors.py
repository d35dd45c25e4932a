"""Exceptions raised by the BlurHash encoder and decoder."""


class BlurHashError(ValueError):
    """Base class for all BlurHash errors."""


class EncodeError(BlurHashError):
    """Image could not be encoded."""


class RangeError(EncodeError):
    """Component count outside [1, 9]."""

    def __init__(self, components_x: int, components_y: int):
        self.components_x = components_x
        self.components_y = components_y
        super().__init__(
            f"Component counts must be between 1 and 9, got {components_x}x{components_y}"
        )


class SizeMismatchError(EncodeError):
    """Pixel buffer length does not match width * height * 4."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Pixel buffer must be {expected} bytes, got {actual}")


class DecodeError(BlurHashError):
    """Hash could not be decoded."""


class LengthError(DecodeError):
    """Hash shorter than the 6-character minimum."""


class FormatError(DecodeError):
    """Hash structure does not match the grid size it declares."""


class AlphabetError(FormatError):
    """Hash contains a character outside the Base83 alphabet."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid Base83 character {char!r} at position {position}")
