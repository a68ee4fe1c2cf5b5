from collections.abc import Callable, Sequence
import copy
from functools import cmp_to_key
import logging
import threading
from types import MappingProxyType
from typing import Any, NamedTuple

from .. import _settings
from ..actors import get_field, is_finite_number, is_valid_voter
from ..abc.election import Election
from .regions import Region, count_votes_in_regions
from .tally import Tally, tally_pure
from .validation import Verdict, create_vote_validator

__all__ = (
    "Ballot", "Result",
    "PanchayatElection", "create_election",
    "Tally", "tally_pure",
    "Verdict", "create_vote_validator",
    "Region", "count_votes_in_regions",
)

logger = logging.getLogger(__name__)

class Ballot(NamedTuple):
    """What a successful vote hands to the success callback."""
    voter_id: str
    candidate_id: str

class Result(NamedTuple):
    id: str
    name: str
    party: str
    votes: int

def _noop(*args, **kwargs):
    return None

def _is_key(obj) -> bool:
    # ids coming from callers may be anything, even unhashable or missing
    if obj is None:
        return False
    try:
        hash(obj)
    except TypeError:
        return False
    return True

class PanchayatElection(Election):
    """A single-seat plurality election over a fixed roster of candidates.

    The roster is read once at construction: any sequence of candidate records
    (Candidate instances, mappings or objects with `id`, `name` and `party`).
    Anything else than a sequence is taken as an empty roster. Candidates are
    not validated, a malformed one simply cannot be voted for.

    Each registered voter may cast one vote. Ties in the results and for the
    winner are broken in favor of the candidate coming first in the roster.

    The state is only reachable through the methods. Registering and voting
    are guarded by a lock, so that an instance can be shared between threads
    without a voter being able to vote twice.
    """

    def __init__(self, candidates: Sequence, /, *, min_age: float|None = None):
        if isinstance(candidates, (str, bytes)) or not isinstance(candidates, Sequence):
            logger.warning("Roster %r is not a sequence, using an empty one", candidates)
            candidates = ()
        if min_age is None:
            min_age = _settings.min_age
        elif not is_finite_number(min_age):
            raise ValueError(f"Invalid minimum age: {min_age!r}")

        self._candidates = tuple(candidates)
        by_id = {}
        for c in self._candidates:
            cid = get_field(c, "id")
            if _is_key(cid):
                by_id[cid] = c
        self._by_id = MappingProxyType(by_id)
        self._min_age = min_age

        self._tally = Tally()
        self._registered = set()
        self._voted = set()
        self._lock = threading.Lock()

        logger.info("Election created with %d candidates", len(self._candidates))

    @property
    def candidates(self) -> tuple:
        return self._candidates

    @property
    def tally(self) -> Tally:
        """A copy of the current tally."""
        return Tally(self._tally)

    def total_votes(self) -> int:
        return self._tally.total()

    def is_registered(self, voter_id, /) -> bool:
        return _is_key(voter_id) and voter_id in self._registered

    def has_voted(self, voter_id, /) -> bool:
        return _is_key(voter_id) and voter_id in self._voted

    def register_voter(self, voter, /) -> bool:
        if not is_valid_voter(voter, self._min_age):
            logger.debug("Rejected invalid voter %r", voter)
            return False

        voter_id = get_field(voter, "id")
        with self._lock:
            if voter_id in self._registered:
                logger.debug("Voter %r is already registered", voter_id)
                return False
            self._registered.add(voter_id)

        logger.debug("Registered voter %r", voter_id)
        return True

    def cast_vote(self, voter_id, candidate_id, /,
            on_success: Callable[[Ballot], Any]|None = None,
            on_error: Callable[[str], Any]|None = None,
            ) -> Any:
        """
        The checks are made in this order, the first failing one giving the
        reason passed to `on_error` : the voter is registered, the candidate
        is on the roster, the voter has not voted yet.
        Callbacks which are not callable are replaced with a no-op returning
        None. Callbacks are called outside the lock.
        """
        if not callable(on_success):
            on_success = _noop
        if not callable(on_error):
            on_error = _noop

        with self._lock:
            if not (_is_key(voter_id) and voter_id in self._registered):
                reason = self.VOTER_NOT_REGISTERED
            elif not (_is_key(candidate_id) and candidate_id in self._by_id):
                reason = self.INVALID_CANDIDATE
            elif voter_id in self._voted:
                reason = self.VOTER_ALREADY_VOTED
            else:
                reason = None
                self._tally = tally_pure(self._tally, candidate_id)
                self._voted.add(voter_id)

        if reason is not None:
            logger.debug("Vote of %r for %r rejected: %s", voter_id, candidate_id, reason)
            return on_error(reason)

        logger.debug("Vote of %r for %r recorded", voter_id, candidate_id)
        return on_success(Ballot(voter_id, candidate_id))

    def get_results(self, sort_fn: Callable[[Result, Result], int|float]|None = None, /) -> list[Result]:
        """
        The results are in decreasing number of votes, candidates having the
        same number of votes being in roster order.
        If `sort_fn` is callable, it is used instead as a comparison function,
        returning a negative number if its first argument comes first, a
        positive number if it comes last, and 0 if they are equivalent.
        """
        tally = self._tally
        results = []
        for c in self._candidates:
            cid = get_field(c, "id")
            votes = tally.get(cid, 0) if _is_key(cid) else 0
            results.append(Result(cid, get_field(c, "name"), get_field(c, "party"), votes))

        if callable(sort_fn):
            results.sort(key=cmp_to_key(sort_fn))
        else:
            # each row keeps its own roster position, whatever its id
            ranked = sorted(enumerate(results), key=lambda pr: (-pr[1].votes, pr[0]))
            results = [r for _i, r in ranked]
        return results

    def get_winner(self):
        """
        Returns a shallow copy of the roster record of the winner, so that
        the roster cannot be altered through it.
        Among candidates tied for the most votes, the one coming first in the
        roster wins.
        """
        results = self.get_results()
        if not results or results[0].votes == 0:
            return None
        return copy.copy(self._by_id[results[0].id])

def create_election(candidates: Sequence, /, *, min_age: float|None = None) -> PanchayatElection:
    """Creates an election over the `candidates` roster."""
    return PanchayatElection(candidates, min_age=min_age)
