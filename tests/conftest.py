import sys
from pathlib import Path

import pytest

# Add project root to sys.path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pages import EMPTY_PAGE, OFFER_PAGE, make_response


@pytest.fixture
def offer_page():
    return make_response(OFFER_PAGE)


@pytest.fixture
def empty_page():
    return make_response(EMPTY_PAGE)
