"""ROT13 text transform."""

import string

_UPPER = string.ascii_uppercase
_LOWER = string.ascii_lowercase

# Only ASCII letters are rotated; every other code point maps to itself.
_ROT13_TABLE = str.maketrans(
    _UPPER + _LOWER,
    _UPPER[13:] + _UPPER[:13] + _LOWER[13:] + _LOWER[:13],
)


def rot13(text: str) -> str:
    """Rotate ASCII letters by 13 places, preserving case.

    Applying the transform twice returns the original text. The result always
    has the same length as the input.

    Args:
        text: Text to encrypt or decrypt.

    Returns:
        The rotated text.
    """
    return text.translate(_ROT13_TABLE)
