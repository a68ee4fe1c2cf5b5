import pytest

from panchayat import _settings
from panchayat.actors import Candidate, Voter, get_field, is_finite_number, is_record, is_valid_voter


def test_get_field():
    assert get_field({"id": "C1"}, "id") == "C1"
    assert get_field(Candidate("C1", "Ram", "Janata"), "party") == "Janata"
    assert get_field({}, "id") is None
    assert get_field(None, "id") is None
    assert get_field(42, "id") is None


def test_is_record():
    assert is_record({})
    assert is_record(Voter("V1", "Mohan", 25))
    assert is_record(object())
    for value in (None, 1, 1.5, True, "V1", b"V1"):
        assert not is_record(value)


@pytest.mark.parametrize("value, expected", [
    (0, True),
    (18.5, True),
    (-3, True),
    (True, False),
    (None, False),
    ("18", False),
    (float("nan"), False),
    (float("-inf"), False),
])
def test_is_finite_number(value, expected):
    assert is_finite_number(value) is expected


def test_is_valid_voter():
    assert is_valid_voter(Voter("V1", "Mohan", 18))
    assert not is_valid_voter(Voter("V1", "Mohan", 17))
    assert is_valid_voter(Voter("V1", "Mohan", 17), min_age=16)
    assert not is_valid_voter(Voter("", "Mohan", 30))


def test_settings_min_age():
    _settings.set_min_age(21)
    assert not is_valid_voter(Voter("V1", "Mohan", 20))
    _settings.reset()
    assert is_valid_voter(Voter("V1", "Mohan", 20))


@pytest.mark.parametrize("age", [None, "18", float("nan"), False])
def test_settings_reject_bad_age(age):
    with pytest.raises(ValueError):
        _settings.set_min_age(age)
    assert _settings.min_age == 18
