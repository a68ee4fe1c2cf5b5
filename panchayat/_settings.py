from math import isfinite
from numbers import Real

def set_min_age(age, /):
    """Sets the minimum voting age used by default.

    Elections and vote validators created without an explicit minimum age
    read this value when they are built, so changing it later does not
    affect the existing ones.
    Raises a ValueError if `age` is not a finite real number.
    """
    global min_age
    if isinstance(age, bool) or not isinstance(age, Real) or not isfinite(age):
        raise ValueError(f"Invalid minimum age: {age!r}")
    min_age = age

def reset():
    """Restores the default settings."""
    set_min_age(18)

reset()
