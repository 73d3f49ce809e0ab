# Characters kept by normalization
NON_ALPHANUMERIC_PATTERN = r"[^A-Z0-9]"

# Letter to digit substitution used by the UPS and OnTrac checksums
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
CHECKSUM_LETTER_DIGITS = "23456789012345678901234567"

# Alternating weights of the modified mod 10 sum
EVEN_POSITION_WEIGHT = 1
ODD_POSITION_WEIGHT = 2

# Checksum configs keyed by carrier name. The core portion is
# number[core_start:core_stop]
UPS_CHECKSUM_CONFIG = {
    "carrier": "UPS",
    "core_start": 2,
    "core_stop": -1,
}
ONTRAC_CHECKSUM_CONFIG = {
    "carrier": "ONTRAC",
    "core_start": 0,
    "core_stop": -1,
}
CHECKSUM_CONFIGS = {
    UPS_CHECKSUM_CONFIG["carrier"]: UPS_CHECKSUM_CONFIG,
    ONTRAC_CHECKSUM_CONFIG["carrier"]: ONTRAC_CHECKSUM_CONFIG,
}

# PDF text extraction
PDF_EXTRACTION_ORIENTATION = 0
