from trackingnumber.domain.generic import IterableEnum


class Carrier(IterableEnum):
    """
    Carriers in the order their rules are evaluated. DHL and AIRBORNE have
    no validation rule yet and never match.
    """
    UPS: str = "UPS"
    USPS: str = "USPS"
    FEDEX: str = "FEDEX"
    ONTRAC: str = "ONTRAC"
    DHL: str = "DHL"
    AIRBORNE: str = "AIRBORNE"
