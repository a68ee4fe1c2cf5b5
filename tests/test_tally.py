from collections import Counter

import pytest

from panchayat.election.tally import Tally, tally_pure


def test_increment_existing():
    assert tally_pure({"a": 1}, "a") == {"a": 2}


def test_add_missing():
    assert tally_pure({}, "b") == {"b": 1}


def test_argument_untouched():
    current = {"C1": 5, "C2": 3}
    new = tally_pure(current, "C2")
    assert current == {"C1": 5, "C2": 3}
    assert new == {"C1": 5, "C2": 4}
    assert new is not current


def test_tally_instance_untouched():
    current = Tally({"C1": 1})
    new = tally_pure(current, "C1")
    assert current["C1"] == 1
    assert new["C1"] == 2
    assert isinstance(new, Tally)
    assert isinstance(new, Counter)


@pytest.mark.parametrize("bad", [None, 3, "C1", ["C1"]])
def test_non_mapping_is_empty(bad):
    assert tally_pure(bad, "C1") == {"C1": 1}


@pytest.mark.parametrize("count", [None, "4", float("nan"), float("inf"), True])
def test_non_number_count_restarts(count):
    assert tally_pure({"C1": count, "C2": 2}, "C1") == {"C1": 1, "C2": 2}


def test_successive_tallies():
    tally = Tally()
    history = [tally]
    for cid in ["C1", "C2", "C1"]:
        tally = tally_pure(tally, cid)
        history.append(tally)
    assert [h.total() for h in history] == [0, 1, 2, 3]
    assert history[-1] == {"C1": 2, "C2": 1}


def test_fromkeys():
    assert Tally.fromkeys(["C1", "C2"]) == {"C1": 0, "C2": 0}
    assert Tally.fromkeys(["C1"], 3)["C1"] == 3


def test_unhashable_candidate_id_leaves_tally_unchanged():
    current = {"C1": 2}
    new = tally_pure(current, ["C1"])
    assert new == {"C1": 2}
    assert new is not current
