"""
Tests for index input filters
"""
import pytest

from scoreboard.core.filters import filter_params


def test_filter_passes_raw_strings():
    params = filter_params({"teamname": " My <b>Team</b> ", "password": "p@ss word"})
    assert params["teamname"] == " My <b>Team</b> "
    assert params["password"] == "p@ss word"


def test_filter_missing_fields_are_none():
    params = filter_params({})
    assert params["teamname"] is None
    assert params["token"] is None
    assert params["team_id"] is None


def test_filter_drops_unknown_fields():
    params = filter_params({"action": "login_team", "admin": "1"})
    assert "admin" not in params


@pytest.mark.parametrize("raw, expected", [
    ("5", 5),
    (" 42 ", 42),
    ("-3", -3),
    (7, 7),
    ("5a", None),
    ("1_000", None),
    ("", None),
    ("4.2", None),
    ("05", None),
    ("0", 0),
    ("-007", None),
])
def test_filter_team_id(raw, expected):
    assert filter_params({"team_id": raw})["team_id"] == expected


@pytest.mark.parametrize("token, expected", [
    ("abc123", "abc123"),
    ("under_score", "under_score"),
    ("with-dash", None),
    ("", None),
    ("sp ace", None),
])
def test_filter_token(token, expected):
    assert filter_params({"token": token})["token"] == expected


@pytest.mark.parametrize("logo, expected", [
    ("badger", "badger"),
    ("4-mysterio", "4-mysterio"),
    ("../etc/passwd", None),
])
def test_filter_logo(logo, expected):
    assert filter_params({"logo": logo})["logo"] == expected


@pytest.mark.parametrize("form, expected", [
    ({"action": "register_names"}, "register_names"),
    ({"action": "bad action!"}, "none"),
    ({}, "none"),
])
def test_filter_action(form, expected):
    assert filter_params(form)["action"] == expected
