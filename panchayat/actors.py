from collections.abc import Mapping
from math import isfinite
from numbers import Real
from typing import Any, NamedTuple

from . import _settings

__all__ = ("Candidate", "Voter", "get_field", "is_record", "is_finite_number", "is_valid_voter")

class Candidate(NamedTuple):
    """A candidate on the roster of an election.

    Elections accept any record exposing `id`, `name` and `party`, either as
    mapping keys or as attributes; this class is the canonical one.
    """
    id: str
    name: str
    party: str

class Voter(NamedTuple):
    id: str
    name: str
    age: int|float

def get_field(record: Any, name: str, /) -> Any:
    """Returns the `name` field of a record, or None if it has none.

    Mappings are looked up by key, other objects by attribute.
    """
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)

def is_record(obj: Any, /) -> bool:
    """Whether `obj` can hold named fields at all.

    None, numbers, strings and other scalars can't.
    """
    if obj is None or isinstance(obj, (str, bytes, Real)):
        return False
    return True

def is_finite_number(value: Any, /) -> bool:
    """Whether `value` is a finite real number, booleans excluded."""
    return (not isinstance(value, bool)) and isinstance(value, Real) and isfinite(value)

def _is_nonempty_str(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0

def is_valid_voter(voter: Any, min_age: float|None = None) -> bool:
    """Whether `voter` is eligible to register.

    The `id` and `name` must be non-empty strings, and the `age` a finite
    number no lower than `min_age`, which defaults to the configured minimum
    voting age.
    """
    if min_age is None:
        min_age = _settings.min_age
    if not is_record(voter):
        return False
    if not _is_nonempty_str(get_field(voter, "id")):
        return False
    if not _is_nonempty_str(get_field(voter, "name")):
        return False
    age = get_field(voter, "age")
    return is_finite_number(age) and age >= min_age
