"""Aggregation of vote counts over a tree of nested regions.

A village reports its votes, a block sums its villages, a district its blocks,
and so on. Each level can also hold votes of its own.
"""

from collections.abc import Sequence
from typing import NamedTuple

from ..actors import get_field, is_finite_number, is_record

__all__ = ("Region", "count_votes_in_regions")

class Region(NamedTuple):
    name: str
    votes: int
    sub_regions: Sequence["Region"] = ()

def count_votes_in_regions(region_tree, /) -> int|float:
    """Returns the votes of the region plus those of all its sub-regions.

    Regions may be Region instances, mappings or objects with `votes` and
    `sub_regions` fields.
    A region which is not a record counts for 0 votes, and so does a region
    whose `votes` is not a finite number (its sub-regions still count).
    A `sub_regions` which is not a list or a tuple is taken as empty.
    """
    if not is_record(region_tree):
        return 0
    votes = get_field(region_tree, "votes")
    if not is_finite_number(votes):
        votes = 0
    subs = get_field(region_tree, "sub_regions")
    if not isinstance(subs, (list, tuple)):
        subs = ()
    return votes + sum(count_votes_in_regions(sub) for sub in subs)
