import logging
from io import BytesIO

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from trackingnumber.domain.tracking.carrier import Carrier
from trackingnumber.domain.tracking.carrier_patterns import CarrierPatterns
from trackingnumber.domain.tracking.tracking_number import TrackingNumber
from trackingnumber.util.constants.tracking import PDF_EXTRACTION_ORIENTATION


logger = logging.getLogger(__name__)


def extract_identifiers(text: str) -> list[str]:
    """
    Searches text for anything shaped like a tracking number of any carrier.
    Matches are uppercased and returned once each, in the order first found.
    No checksum validation is applied.

    :param text: text to search, e.g. an email body or a URL
    :return: distinct tracking number candidates
    """
    subject = text.upper()
    candidates = []
    for pattern in CarrierPatterns:
        candidates += pattern.find_all(subject)
    distinct = list(dict.fromkeys(candidates))
    logger.debug("Found %s tracking number candidates (%s distinct)",
                 len(candidates), len(distinct))
    return distinct


def extract_identifiers_from_pdfs(attachments: list[bytes]) -> list[str]:
    """
    Parses pdf attachments searching for tracking number candidates.
    Returns the distinct candidates found across every page of every
    attachment.

    :param attachments: pdf files as bytes
    :return: distinct tracking number candidates
    """
    candidates = []
    for index, attachment in enumerate(attachments):
        try:
            reader = PdfReader(BytesIO(attachment), strict=False)
            pages = reader.pages
            logger.debug("Searching %s pages of pdf attachment %s",
                         len(pages), index)
            for page in pages:
                text = page.extract_text(PDF_EXTRACTION_ORIENTATION)
                candidates += extract_identifiers(text or "")
        except PdfReadError:
            logger.warning("Unable to read pdf attachment %s", index)
            raise
    return list(dict.fromkeys(candidates))


def identify_all(text: str) -> dict[Carrier, list[str]]:
    """
    Extracts candidates from text and validates each against every carrier.
    Returns the valid tracking numbers keyed by carrier; candidates that no
    carrier accepts are dropped. A number valid for several carriers is
    listed under each.

    :param text: text to search
    :return: dictionary of validated tracking numbers
    """
    valid = {}
    for candidate in extract_identifiers(text):
        tracking_number = TrackingNumber(candidate)
        for carrier in tracking_number.carriers:
            valid.setdefault(carrier, []).append(tracking_number.normalized)
    return valid
