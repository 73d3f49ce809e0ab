import re

from trackingnumber.domain.generic import IterableEnum


class CarrierPatterns(IterableEnum):
    UPS: str = r"\b1Z\w{16}\b"
    ONTRAC: str = r"\bC\d{14}\b"
    # SmartPost numbers satisfy both FEDEX and USPS
    FEDEX: str = r"\b(9\d{10,21}|\d{15})\b"
    USPS: str = r"\b(9\d{10,21}|\w\w\d{9}US)\b"

    @property
    def regex(self) -> re.Pattern:
        return _COMPILED_PATTERNS[self.name]

    def matches(self, number: str) -> bool:
        return self.regex.search(number) is not None

    def find_all(self, text: str) -> list[str]:
        return [match.group(0) for match in self.regex.finditer(text)]


_COMPILED_PATTERNS = {
    name: re.compile(pattern, re.ASCII)
    for name, pattern in CarrierPatterns.map()
}
