import logging
import re
from dataclasses import dataclass, field

from trackingnumber.domain.tracking.carrier import Carrier
from trackingnumber.domain.tracking.carrier_patterns import CarrierPatterns
from trackingnumber.domain.tracking.checksum_config import ONTRAC_CHECKSUM
from trackingnumber.domain.tracking.checksum_config import UPS_CHECKSUM
from trackingnumber.util.constants.tracking import NON_ALPHANUMERIC_PATTERN


logger = logging.getLogger(__name__)

_NON_ALPHANUMERIC = re.compile(NON_ALPHANUMERIC_PATTERN)


def normalize(value) -> str:
    """
    Uppercases the value and strips every character outside [A-Z0-9].
    None normalizes to an empty string.

    :param value: anything convertible to str
    :return: normalized tracking number
    """
    text = "" if value is None else str(value)
    return _NON_ALPHANUMERIC.sub("", text.upper())


@dataclass(frozen=True)
class TrackingNumber:
    """
    A candidate tracking number. The number is normalized and checked against
    every carrier once, on construction.
    """
    raw: str
    normalized: str = field(init=False)
    carriers: tuple[Carrier, ...] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "normalized", normalize(self.raw))
        object.__setattr__(self, "carriers", tuple(
            carrier for carrier in Carrier if self.matches(carrier)
        ))
        logger.debug("Tracking number %s matched carriers %s",
                     self.normalized,
                     [carrier.value for carrier in self.carriers])

    @property
    def raw_string(self) -> str:
        return self.raw

    @property
    def normalized_string(self) -> str:
        return self.normalized

    @property
    def string(self) -> str:
        return self.normalized

    def get_carrier(self) -> Carrier | None:
        """ First matching carrier in evaluation order, if any """
        return self.carriers[0] if self.carriers else None

    def matches(self, carrier: Carrier) -> bool:
        return _PREDICATES[carrier](self)

    def is_ups(self) -> bool:
        if not CarrierPatterns.UPS.matches(self.normalized):
            return False
        return UPS_CHECKSUM.is_valid(self.normalized)

    def is_usps(self) -> bool:
        return CarrierPatterns.USPS.matches(self.normalized)

    def is_fedex(self) -> bool:
        return CarrierPatterns.FEDEX.matches(self.normalized)

    def is_ontrac(self) -> bool:
        if not CarrierPatterns.ONTRAC.matches(self.normalized):
            return False
        return ONTRAC_CHECKSUM.is_valid(self.normalized)

    def is_dhl(self) -> bool:
        # No DHL validation rule exists yet
        return False

    def is_airborne(self) -> bool:
        # No Airborne validation rule exists yet
        return False


_PREDICATES = {
    Carrier.UPS: TrackingNumber.is_ups,
    Carrier.USPS: TrackingNumber.is_usps,
    Carrier.FEDEX: TrackingNumber.is_fedex,
    Carrier.ONTRAC: TrackingNumber.is_ontrac,
    Carrier.DHL: TrackingNumber.is_dhl,
    Carrier.AIRBORNE: TrackingNumber.is_airborne,
}
