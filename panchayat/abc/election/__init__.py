import abc
from collections.abc import Callable, Sequence
from typing import Any, ClassVar

__all__ = ("Election",)

class Election(abc.ABC):
    """
    Implements the rules to go from registered voters casting votes to the
    ranked candidates of a fixed roster.

    Expected failures never raise: registration reports them by returning
    False, and vote casting by calling the error callback with one of the
    reason strings held as class attributes.
    """

    VOTER_NOT_REGISTERED: ClassVar[str] = "voter not registered"
    INVALID_CANDIDATE: ClassVar[str] = "invalid candidate"
    VOTER_ALREADY_VOTED: ClassVar[str] = "voter already voted"

    @abc.abstractmethod
    def register_voter(self, voter, /) -> bool:
        """Registers a voter, returns whether it worked.

        Invalid voters and already registered voter ids are rejected.
        """

    @abc.abstractmethod
    def cast_vote(self, voter_id, candidate_id, /,
            on_success: Callable[[Any], Any]|None = None,
            on_error: Callable[[str], Any]|None = None,
            ) -> Any:
        """Records the vote of `voter_id` for `candidate_id`.

        This is an abstract method that needs to be overridden in subclasses.

        On success, `on_success` is called with the recorded ballot, and on
        failure `on_error` is called with the reason. In either case, the
        return value of the callback is returned.
        """

    @abc.abstractmethod
    def get_results(self, sort_fn: Callable[[Any, Any], int|float]|None = None, /) -> Sequence:
        """Returns the number of votes of each candidate on the roster.

        `sort_fn`, if passed, is a comparison function ordering the results.
        """

    @abc.abstractmethod
    def get_winner(self):
        """Returns the candidate with the most votes, or None if nobody voted."""
