"""Zuglang numerals: letters A-J as base-10 digits.

``decode`` turns a numeral-string into an integer, ``encode`` turns an integer
back into a numeral-string. Both are pure.
"""

from __future__ import annotations

from zuglang_tools.constants import DIGIT_LETTERS, LETTER_VALUES, MAX_NUMERAL_DIGITS
from zuglang_tools.errors import EmptyInputError, InvalidDigitError, NumeralTooLongError


def decode(numeral: str, *, signed: bool = False) -> int:
    """Decode a Zuglang numeral-string into an integer.

    Letters are case-insensitive and read most-significant first, so
    ``decode("BC") == 12``.

    Args:
        numeral: The numeral-string to decode.
        signed: Accept one leading ``-`` and return a negative value. When
            False (the default) the numeral is a magnitude and ``-`` is an
            invalid digit.

    Raises:
        EmptyInputError: If there are no digits to decode.
        NumeralTooLongError: If there are more than ``MAX_NUMERAL_DIGITS`` digits.
        InvalidDigitError: If a character is not one of A-J. The reported
            position indexes *numeral* as given.
    """
    offset = 1 if signed and numeral.startswith("-") else 0
    digits = numeral[offset:]
    if not digits:
        raise EmptyInputError(numeral)
    if len(digits) > MAX_NUMERAL_DIGITS:
        raise NumeralTooLongError(len(digits), MAX_NUMERAL_DIGITS)

    result = 0
    for index, char in enumerate(digits, start=offset):
        # Per character, so case folds like "ß" -> "SS" cannot shift positions.
        folded = char.upper()
        digit = LETTER_VALUES.get(folded)
        if digit is None:
            raise InvalidDigitError(folded if len(folded) == 1 else char, position=index)
        result = result * 10 + digit

    return -result if offset else result


def encode(value: int) -> str:
    """Encode an integer as a Zuglang numeral-string.

    >>> encode(37)
    'DH'
    >>> encode(-5)
    '-F'
    >>> encode(0)
    'A'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"encode() expects an int, got {type(value).__name__}")
    if value == 0:
        return DIGIT_LETTERS[0]

    letters: list[str] = []
    remaining = abs(value)
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        letters.append(DIGIT_LETTERS[digit])

    result = "".join(reversed(letters))
    return "-" + result if value < 0 else result
