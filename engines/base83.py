"""Base83 positional numeral codec used for every hash field."""

from engines.errors import AlphabetError
from utils.constants import BASE83_ALPHABET, BASE83_VALUES


def encode(value: int, length: int) -> str:
    """Write value as exactly `length` Base83 digits, most significant first."""
    value = int(value)
    if value < 0 or value >= 83 ** length:
        raise ValueError(f"Value {value} does not fit in {length} Base83 digits")

    digits = []
    for position in range(length):
        digit = value // (83 ** (length - 1 - position)) % 83
        digits.append(BASE83_ALPHABET[digit])
    return "".join(digits)


def decode(chars: str, offset: int = 0) -> int:
    """
    Horner-evaluate a Base83 string to an integer.

    `offset` is only used to report the character position in the hash
    when an invalid character is found.
    """
    value = 0
    for index, char in enumerate(chars):
        digit = BASE83_VALUES.get(char)
        if digit is None:
            raise AlphabetError(char, offset + index)
        value = value * 83 + digit
    return value
