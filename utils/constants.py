"""BlurHash format constants."""

# Order is significant: a character's index is its digit value.
BASE83_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz#$%*+,-.:;=?@[]^_{|}~"
BASE83_VALUES = {char: index for index, char in enumerate(BASE83_ALPHABET)}

BYTES_PER_PIXEL = 4

MIN_COMPONENTS = 1
MAX_COMPONENTS = 9

# Hash layout: size flag, quantized max, DC, then AC pairs
SIZE_FLAG_LENGTH = 1
MAX_VALUE_LENGTH = 1
DC_LENGTH = 4
AC_LENGTH = 2
MIN_HASH_LENGTH = SIZE_FLAG_LENGTH + MAX_VALUE_LENGTH + DC_LENGTH

# AC magnitude quantization
MAX_AC_SCALE = 166.0
MAX_AC_QUANT = 82
AC_QUANT_LEVELS = 19
