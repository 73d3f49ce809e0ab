from trackingnumber.util.constants.tracking import ALPHABET
from trackingnumber.util.constants.tracking import CHECKSUM_LETTER_DIGITS
from trackingnumber.util.constants.tracking import EVEN_POSITION_WEIGHT
from trackingnumber.util.constants.tracking import ODD_POSITION_WEIGHT


def to_digit(char: str) -> int:
    """
    Returns the integer value of a digit character, 0 for anything else
    (including the empty string)
    """
    return int(char) if char.isdigit() else 0


def map_to_digit(char: str,
                 letter_digits: str = CHECKSUM_LETTER_DIGITS) -> str:
    """
    Substitutes an uppercase letter with its checksum digit. Any other
    character is returned unchanged.

    :param char: single character to map
    :param letter_digits: digit for each letter of the alphabet, A first
    :return: mapped character
    """
    position = ALPHABET.find(char) if char else -1
    if position < 0:
        return char
    return letter_digits[position]


def modified_mod_ten(digits: str) -> int:
    """
    Weighted digit sum where characters at even (0-based) positions count
    once and characters at odd positions count twice

    :param digits: digit string, letters already substituted
    :return: weighted sum
    """
    return sum(
        (EVEN_POSITION_WEIGHT if idx % 2 == 0 else ODD_POSITION_WEIGHT)
        * to_digit(char)
        for idx, char in enumerate(digits)
    )


def next_multiple_of_ten(num: int) -> int:
    # A multiple of ten rolls over to the next one: 160 -> 170
    return num + 10 - num % 10


def checksum_remainder(total: int) -> int:
    """
    Distance from the weighted sum to the next multiple of ten, with a
    distance of 10 folded to 0
    """
    remainder = next_multiple_of_ten(total) - total
    return 0 if remainder == 10 else remainder
