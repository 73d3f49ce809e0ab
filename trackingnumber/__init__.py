from trackingnumber.domain.tracking.carrier import Carrier
from trackingnumber.domain.tracking.tracking_number import TrackingNumber
from trackingnumber.util.tracking.util import extract_identifiers
from trackingnumber.util.tracking.util import extract_identifiers_from_pdfs
from trackingnumber.util.tracking.util import identify_all

__all__ = [
    "Carrier",
    "TrackingNumber",
    "extract_identifiers",
    "extract_identifiers_from_pdfs",
    "identify_all",
]
