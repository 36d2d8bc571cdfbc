"""Shared fixtures: a reference CRF with hand-set weights."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from usaddr import AddressParser
from usaddr.models import LinearChainCRF

# Enough weight to label the example addresses used across the tests
REFERENCE_WEIGHTS = {
    "address.start": {"AddressNumber": 2.0},
    "digits=all_digits": {"AddressNumber": 1.0, "ZipCode": 1.0},
    "address.end": {"ZipCode": 2.0},
    "word=Main": {"StreetName": 3.0},
    "word=Street": {"StreetName": 3.0},
    "word=St": {"StreetNamePostType": 3.0},
    "word=Springfield": {"PlaceName": 3.0},
    "word=IL": {"StateName": 3.0},
}


@pytest.fixture
def reference_crf():
    return LinearChainCRF.from_weights(REFERENCE_WEIGHTS)


@pytest.fixture
def parser(reference_crf):
    return AddressParser(tagger=reference_crf)
