import pytest

from panchayat import _settings
from panchayat.actors import Candidate


@pytest.fixture(autouse=True)
def default_settings():
    _settings.reset()
    yield
    _settings.reset()


@pytest.fixture
def roster():
    return [
        Candidate("C1", "Sarpanch Ram", "Janata"),
        Candidate("C2", "Pradhan Sita", "Lok"),
    ]
