from collections.abc import Callable
from typing import Any, NamedTuple

from .. import _settings
from ..actors import get_field, is_finite_number, is_record

__all__ = ("Verdict", "create_vote_validator")

class Verdict(NamedTuple):
    """The outcome of a validation, with the reason of the first failing check."""
    valid: bool
    reason: str|None = None

def _is_missing(value) -> bool:
    # 0 and False are legitimate values
    return value is None or (isinstance(value, str) and not value)

def create_vote_validator(rules=None) -> Callable[[Any], Verdict]:
    """Returns a function checking voters against the `rules`.

    `rules` is a mapping or an object, with the optional `min_age` and
    `required_fields` fields. If `min_age` is not a finite number, the
    configured minimum voting age is used. If `required_fields` is not a list
    or a tuple of field names, no field is required.

    The returned function does not depend on anything but the rules, and
    returns a Verdict for the voter it is passed. The checks are, in order :
    that the voter is a record at all ("invalid voter"), that each required
    field is present and not an empty string ("missing field: <field>"), and
    that the age is a number no lower than the minimum age ("underage").
    """
    min_age = get_field(rules, "min_age")
    if not is_finite_number(min_age):
        min_age = _settings.min_age
    required_fields = get_field(rules, "required_fields")
    if not isinstance(required_fields, (list, tuple)):
        required_fields = ()
    required_fields = tuple(required_fields)

    def validate(voter, /) -> Verdict:
        if not is_record(voter):
            return Verdict(False, "invalid voter")

        for field in required_fields:
            if _is_missing(get_field(voter, field)):
                return Verdict(False, f"missing field: {field}")

        age = get_field(voter, "age")
        if not (is_finite_number(age) and age >= min_age):
            return Verdict(False, "underage")

        return Verdict(True)

    return validate
