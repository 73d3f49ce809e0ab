import pytest

from trackingnumber.domain.tracking.carrier import Carrier
from trackingnumber.domain.tracking.carrier_patterns import CarrierPatterns


def test_carrier_evaluation_order():
    assert Carrier.names() == [
        "UPS", "USPS", "FEDEX", "ONTRAC", "DHL", "AIRBORNE"
    ]


def test_carrier_lookup_by_name():
    assert Carrier["ONTRAC"] is Carrier.ONTRAC
    with pytest.raises(KeyError):
        Carrier["CANADA_POST"]


def test_carrier_patterns_extraction_order():
    assert [name for name, _ in CarrierPatterns.map()] == [
        "UPS", "ONTRAC", "FEDEX", "USPS"
    ]


def test_carrier_patterns_are_compiled_once():
    assert CarrierPatterns.UPS.regex is CarrierPatterns.UPS.regex


@pytest.mark.parametrize("pattern, number", [
    (CarrierPatterns.UPS, "1Z0T3731P292258842"),
    (CarrierPatterns.ONTRAC, "C10999911320231"),
    (CarrierPatterns.FEDEX, "9102927010180027375941"),
    (CarrierPatterns.FEDEX, "076884980006374"),
    (CarrierPatterns.USPS, "9102901000462189604217"),
    (CarrierPatterns.USPS, "EI457881382US"),
])
def test_pattern_matches(pattern, number):
    assert pattern.matches(number)


@pytest.mark.parametrize("pattern, number", [
    (CarrierPatterns.UPS, "1Z0T3731P2922588"),
    (CarrierPatterns.UPS, "1ZW0X5110319778880678890678342"),
    (CarrierPatterns.ONTRAC, "C1099991132023"),
    (CarrierPatterns.ONTRAC, "D10999911320231"),
    (CarrierPatterns.FEDEX, "8675309"),
    (CarrierPatterns.FEDEX, "9102927010"),
    (CarrierPatterns.USPS, "EI457881382CA"),
])
def test_pattern_rejects(pattern, number):
    assert not pattern.matches(number)


def test_pattern_find_all_returns_whole_match():
    text = "SEE 9102901000462189604217 AND EI457881382US"
    assert CarrierPatterns.USPS.find_all(text) == [
        "9102901000462189604217", "EI457881382US"
    ]


def test_word_characters_are_ascii_only():
    assert not CarrierPatterns.UPS.matches("1Z0T3731P29225884É")
