"""Vote counting.

A tally maps each candidate id to the number of votes it received. Elections
never increment a tally in place: each accepted vote goes through `tally_pure`
and the new tally replaces the previous one.
"""

from collections import Counter
from collections.abc import Iterable, Mapping

from ..actors import is_finite_number

__all__ = ("Tally", "tally_pure")

class Tally[C](Counter[C]):
    """Tally : Counter(candidate id : number of votes)

    {"C1" : 5, "C2" : 3} -> 5 votes for C1, 3 for C2
    Candidates which received no vote may be absent, and count as 0.
    """

    __slots__ = () # useless for Counter

    @classmethod
    def fromkeys(cls, keys: Iterable[C], value: int = 0, /) -> "Tally[C]":
        return cls(dict.fromkeys(keys, value))

def tally_pure[C](current_tally: Mapping[C, int], candidate_id: C, /) -> Tally[C]:
    """Returns a new tally where `candidate_id` has one more vote.

    `current_tally` is left untouched. Anything else than a mapping is taken
    as an empty tally, and a count which is not a finite number as 0.
    An unhashable `candidate_id` cannot be counted, and yields an unchanged
    copy.
    """
    if not isinstance(current_tally, Mapping):
        current_tally = {}
    try:
        hash(candidate_id)
    except TypeError:
        return Tally(current_tally)
    current = current_tally.get(candidate_id)
    if not is_finite_number(current):
        current = 0
    rv = Tally(current_tally)
    rv[candidate_id] = current + 1
    return rv
