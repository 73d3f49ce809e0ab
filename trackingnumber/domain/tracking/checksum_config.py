from dataclasses import dataclass

from dacite import from_dict

from trackingnumber.util.constants.tracking import ALPHABET
from trackingnumber.util.constants.tracking import CHECKSUM_CONFIGS
from trackingnumber.util.constants.tracking import CHECKSUM_LETTER_DIGITS
from trackingnumber.util.tracking import checksum_remainder
from trackingnumber.util.tracking import map_to_digit
from trackingnumber.util.tracking import modified_mod_ten
from trackingnumber.util.tracking import to_digit


@dataclass(frozen=True)
class ChecksumConfig:
    """
    Modified mod 10 check for a carrier. The core portion of a number is
    number[core_start:core_stop]; its letters are substituted with digits,
    the weighted sum is taken, and the distance to the next multiple of ten
    must equal the final character of the number.
    """
    carrier: str
    core_start: int
    core_stop: int
    letter_digits: str = CHECKSUM_LETTER_DIGITS

    def __post_init__(self):
        if (
                len(self.letter_digits) != len(ALPHABET)
                or not self.letter_digits.isdigit()
        ):
            raise ValueError(f"{self.carrier} letter_digits must map each of "
                             f"the {len(ALPHABET)} letters to a digit")

    @classmethod
    def for_carrier(cls, carrier: str) -> "ChecksumConfig":
        return from_dict(data_class=cls, data=CHECKSUM_CONFIGS[carrier])

    def core_portion(self, number: str) -> str:
        return number[self.core_start:self.core_stop]

    def mapped_core_portion(self, number: str) -> str:
        return "".join(
            map_to_digit(char, self.letter_digits)
            for char in self.core_portion(number)
        )

    def checksum(self, number: str) -> int:
        return modified_mod_ten(self.mapped_core_portion(number))

    def remainder(self, number: str) -> int:
        return checksum_remainder(self.checksum(number))

    def checksum_digit(self, number: str) -> int:
        return to_digit(number[-1:])

    def is_valid(self, number: str) -> bool:
        return self.remainder(number) == self.checksum_digit(number)


UPS_CHECKSUM = ChecksumConfig.for_carrier("UPS")
ONTRAC_CHECKSUM = ChecksumConfig.for_carrier("ONTRAC")
