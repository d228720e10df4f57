"""
Validation predicates used to reject bad input before a request is made.

Every function here is a pure predicate: it returns ``True`` or ``False`` and
never raises, whatever it is handed.
"""

import re
from collections.abc import Collection, Mapping
from typing import Any

from propublica_congress.data import CHAMBERS, STATES

PAGE_SIZE = 20

# Package default only. The ceiling actually applied comes from
# Settings.current_congress or the facade's constructor.
CURRENT_CONGRESS = 115

EARLIEST_YEAR = 1789

_INTEGER_RE = re.compile(r"-?\d+", re.ASCII)
_BILL_ID_RE = re.compile(r"[a-z]+\d+", re.ASCII)
_MEMBER_ID_RE = re.compile(r"[A-Z]\d{6}", re.ASCII)
_COMMITTEE_ID_RE = re.compile(r"[A-Z]{4}", re.ASCII)
_SUBCOMMITTEE_ID_RE = re.compile(r"[A-Z]{4}\d{2}", re.ASCII)
_NOMINATION_ID_RE = re.compile(r"PN\d+(-\d+)?", re.ASCII)
_SUBJECT_RE = re.compile(r"[a-z0-9]+(-[a-z0-9]+)*", re.ASCII)


def _as_int(value: Any) -> int | None:
    """Return ``value`` as an int if it is an int or an integral numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()):
        return int(value)
    return None


def _matches(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_valid_offset(offset: Any) -> bool:
    """Whether ``offset`` can be sent as a page offset (0, 20, 40, ...)."""
    number = _as_int(offset)
    return number is not None and number >= 0 and number % PAGE_SIZE == 0


def is_valid_api_key(api_key: Any) -> bool:
    return isinstance(api_key, str) and len(api_key) > 0


def is_valid_type(value: Any, type_set: Collection[str] = frozenset()) -> bool:
    """Whether ``value`` is a non-empty string found in ``type_set``."""
    return isinstance(value, str) and bool(value) and value in type_set


def is_valid_chamber(chamber: Any) -> bool:
    return is_valid_type(chamber, CHAMBERS)


def is_valid_congress(
    session: Any,
    earliest: int | None = None,
    current: int = CURRENT_CONGRESS,
) -> bool:
    """
    Whether ``session`` is a congress number the API can answer for.

    Args:
        session: Congress number to check.
        earliest: Lowest congress the endpoint covers. Endpoints differ.
        current: Most recent congress; nothing above it is accepted.
    """
    number = _as_int(session)
    if number is None:
        return False
    if earliest is not None:
        lower = _as_int(earliest)
        if lower is None or number < lower:
            return False
    ceiling = _as_int(current)
    return ceiling is not None and number <= ceiling


def is_valid_current_congress(current: Any) -> bool:
    """Whether ``current`` can serve as the most recent congress (a positive integer)."""
    number = _as_int(current)
    return number is not None and number > 0


def is_valid_bill_id(bill_id: Any) -> bool:
    """Bill slugs as the API spells them: ``hr21``, ``s5``, ``hres123``."""
    return _matches(_BILL_ID_RE, bill_id)


def is_valid_member_id(member_id: Any) -> bool:
    """Bioguide IDs: one capital letter followed by six digits (``K000388``)."""
    return _matches(_MEMBER_ID_RE, member_id)


def is_valid_committee_id(committee_id: Any) -> bool:
    return _matches(_COMMITTEE_ID_RE, committee_id)


def is_valid_subcommittee_id(subcommittee_id: Any) -> bool:
    return _matches(_SUBCOMMITTEE_ID_RE, subcommittee_id)


def is_valid_nomination_id(nomination_id: Any) -> bool:
    return _matches(_NOMINATION_ID_RE, nomination_id)


def is_valid_subject(subject: Any) -> bool:
    """Subject slugs, e.g. ``meat`` or ``climate-change``."""
    return _matches(_SUBJECT_RE, subject)


def is_valid_state(state: Any) -> bool:
    return is_valid_type(state, STATES)


def is_valid_district(district: Any) -> bool:
    """House district number; ``0`` is the at-large seat."""
    number = _as_int(district)
    return number is not None and number >= 0


def is_valid_year(year: Any) -> bool:
    number = _as_int(year)
    return number is not None and EARLIEST_YEAR <= number <= 9999


def is_valid_month(month: Any) -> bool:
    number = _as_int(month)
    return number is not None and 1 <= number <= 12


def is_valid_session_number(session_number: Any) -> bool:
    return _as_int(session_number) in (1, 2)


def is_valid_roll_call_number(roll_call_number: Any) -> bool:
    number = _as_int(roll_call_number)
    return number is not None and number > 0


def is_valid_response(payload: Any, exact: bool = True) -> bool:
    """
    Whether a decoded response body is a usable results envelope.

    With ``exact`` the ``results`` list must hold exactly one element,
    otherwise at least one.
    """
    if not isinstance(payload, Mapping):
        return False
    results = payload.get("results")
    if not isinstance(results, list):
        return False
    return len(results) == 1 if exact else len(results) >= 1
