"""
Input filters for the index endpoint

Mirrors a filter declaration: every known POST field is either passed
through, validated as an integer, or matched against a regex. A value
that fails its filter is dropped (treated as absent).
"""
import re
from typing import Any, Callable, Dict, Mapping, Optional


WORD_DASH_RE = re.compile(r'^[\w-]+$')
WORD_RE = re.compile(r'^[\w]+$')
INT_RE = re.compile(r'^[+-]?(?:0|[1-9][0-9]*)$')  # no leading zeros


def _raw(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not INT_RE.fullmatch(value):
        return None
    return int(value)


def _regexp(pattern: re.Pattern) -> Callable[[Any], Optional[str]]:
    def check(value: Any) -> Optional[str]:
        if isinstance(value, str) and pattern.fullmatch(value):
            return value
        return None
    return check


INDEX_FILTERS: Dict[str, Callable[[Any], Any]] = {
    'team_id': _int,
    'teamname': _raw,
    'password': _raw,
    'logo': _regexp(WORD_DASH_RE),
    'token': _regexp(WORD_RE),
    'names': _raw,
    'emails': _raw,
    'action': _regexp(WORD_DASH_RE),
}


def filter_params(form: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Apply INDEX_FILTERS to submitted form fields

    Unknown fields are discarded, failing fields become None, and a missing
    or invalid action becomes 'none'.

    Example:
        >>> filter_params({"action": "login_team", "team_id": "5", "token": "a-b"})["team_id"]
        5
    """
    params = {name: check(form[name]) if name in form else None for name, check in INDEX_FILTERS.items()}
    if params['action'] is None:
        params['action'] = 'none'
    return params
