import pytest


VALID_UPS_NUMBERS = [
    "1Z0T3731P292258842",
    "1Z5FX0076803466397",
    "1ZW0X5110319778880",
]
VALID_ONTRAC_NUMBERS = [
    "C10999911320231",
    "C10999606576777",
    "C11001105367744",
    "C11000411158855",
]


@pytest.fixture(params=VALID_UPS_NUMBERS)
def ups_number(request) -> str:
    return request.param


@pytest.fixture(params=VALID_ONTRAC_NUMBERS)
def ontrac_number(request) -> str:
    return request.param


@pytest.fixture
def mock_pdf_reader(mocker):
    """
    Replaces pypdf's PdfReader in the tracking util module. Call the
    fixture with the page texts of each attachment, in order.
    """
    reader_class = mocker.patch("trackingnumber.util.tracking.util.PdfReader")
    readers = []

    def _build(pages_text_per_pdf: list[list[str]]):
        for pages_text in pages_text_per_pdf:
            reader = mocker.MagicMock()
            reader.pages = []
            for text in pages_text:
                page = mocker.MagicMock()
                page.extract_text.return_value = text
                reader.pages.append(page)
            readers.append(reader)
        reader_class.side_effect = readers
        return reader_class

    return _build
