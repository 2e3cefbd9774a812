"""Input checks shared by the services."""

import math


def has_user_id(user_id: str | None) -> bool:
    """Return True for a user id that is not blank."""
    return bool(user_id and user_id.strip())


def all_positive(*values: float) -> bool:
    """Return True when every value is a finite number above zero."""
    return all(math.isfinite(value) and value > 0 for value in values)
