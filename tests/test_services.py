"""
Tests for team storage, invite tokens and logos
"""
import pytest

from passlib.hash import pbkdf2_sha256

from scoreboard.services.logos import LogoService
from scoreboard.services.team_registry import TeamRepository
from scoreboard.services.tokens import TokenService


# ==================== TEAMS ====================

def test_create_assigns_increasing_ids(teams):
    first = teams.create("one", teams.generate_hash("pw"), "crab")
    second = teams.create("two", teams.generate_hash("pw"), "crab")
    assert (first, second) == (1, 2)


def test_create_rejects_duplicate(teams):
    teams.create("Bob", teams.generate_hash("pw"), "crab")
    assert teams.create(" BOB ", teams.generate_hash("pw"), "crab") is None
    assert len(teams.all_teams()) == 1


def test_team_exist_case_insensitive(teams):
    teams.create("Bob", teams.generate_hash("pw"), "crab")
    assert teams.team_exist("bob")
    assert teams.get_team_by_name("BOB").name == "Bob"
    assert not teams.team_exist("Bobby")


def test_generate_hash_is_not_plaintext(teams):
    password_hash = teams.generate_hash("s3cret")
    assert password_hash != "s3cret"
    assert pbkdf2_sha256.verify("s3cret", password_hash)


def test_verify_credentials(teams):
    team_id = teams.create("Bob", teams.generate_hash("pw"), "crab")
    assert teams.verify_credentials(team_id, "pw").id == team_id
    assert teams.verify_credentials(team_id, "wrong") is None
    assert teams.verify_credentials(999, "pw") is None


def test_verify_credentials_upgrades_weak_hash(teams):
    """Hashes with too few rounds are replaced on login"""
    weak = pbkdf2_sha256.using(rounds=1000).hash("pw")
    team_id = teams.create("Bob", weak, "crab")

    assert teams.verify_credentials(team_id, "pw") is not None
    assert teams.get_team(team_id).password_hash != weak
    assert pbkdf2_sha256.from_string(teams.get_team(team_id).password_hash).rounds >= 29000
    assert teams.verify_credentials(team_id, "pw") is not None


def test_add_team_data(teams):
    team_id = teams.create("Bob", teams.generate_hash("pw"), "crab")
    teams.add_team_data("Ann", "ann@x.com", team_id)
    teams.add_team_data("Ben", "ben@x.com", team_id)
    assert [e.name for e in teams.get_team_data(team_id)] == ["Ann", "Ben"]


def test_add_team_data_unknown_team(teams):
    with pytest.raises(KeyError):
        teams.add_team_data("Ann", "ann@x.com", 42)


# ==================== TOKENS ====================

def test_token_check_and_use(tokens):
    assert tokens.check("invite1")
    tokens.use("invite1", 3)
    assert not tokens.check("invite1")
    assert tokens.check("invite2")


def test_token_use_twice(tokens):
    tokens.use("invite1", 3)
    with pytest.raises(ValueError):
        tokens.use("invite1", 4)


def test_token_unknown():
    service = TokenService()
    assert not service.check("nope")
    with pytest.raises(KeyError):
        service.use("nope", 1)


def test_token_generate():
    service = TokenService()
    issued = service.generate(3)
    assert len({t.token for t in issued}) == 3
    assert all(t.token.isalnum() for t in issued)
    assert all(service.check(t.token) for t in issued)


def test_token_generate_invalid_count():
    with pytest.raises(ValueError):
        TokenService().generate(0)


def test_token_delete(tokens):
    assert tokens.delete("invite1")
    assert not tokens.check("invite1")
    assert not tokens.delete("invite1")


# ==================== LOGOS ====================

def test_logo_exists(logos):
    assert logos.check_exists("crab")
    assert not logos.check_exists("unicorn")


def test_random_logo_only_enabled(logos):
    logos.set_enabled("badger", False)
    logos.set_enabled("crab", False)
    assert {logos.random_logo() for _ in range(20)} == {"ghost"}


def test_random_logo_without_logos():
    with pytest.raises(LookupError):
        LogoService().random_logo()


def test_md5_hash_does_not_verify(teams):
    """Only pbkdf2_sha256 hashes are accepted"""
    team_id = teams.create("Bob", "5f4dcc3b5aa765d61d8327deb882cf99", "crab")  # md5("password")

    assert teams.verify_credentials(team_id, "password") is None


def test_cannot_disable_last_logo(logos):
    logos.set_enabled("badger", False)
    logos.set_enabled("crab", False)

    with pytest.raises(ValueError):
        logos.set_enabled("ghost", False)
    assert logos.random_logo() == "ghost"
