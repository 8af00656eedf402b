import time
import types

import itsdangerous.timed
import pytest

from flashdeck.errors import (
    DuplicateUser, InvalidCredential, InvalidCredentials, MissingCredential, ValidationError,
)
from flashdeck.services import AuthService
from flashdeck.services.auth import Identity


@pytest.fixture()
def auth(app_instance):
    with app_instance.app_context():
        yield app_instance.extensions['flashdeck'].auth


def clock_shifted_by(seconds):
    return types.SimpleNamespace(time=lambda: time.time() - seconds)


def test_register_then_login(auth):
    token = auth.register('alice', 's3cret')
    assert auth.validate_credential(token).id == auth.validate_credential(auth.login('alice', 's3cret')).id


def test_login_wrong_password_and_unknown_user_look_the_same(auth):
    auth.register('alice', 's3cret')
    with pytest.raises(InvalidCredentials) as wrong_pw:
        auth.login('alice', 'nope')
    with pytest.raises(InvalidCredentials) as unknown:
        auth.login('bob', 's3cret')
    assert wrong_pw.value.message == unknown.value.message


def test_username_is_case_sensitive(auth):
    auth.register('alice', 'pw')
    auth.register('Alice', 'pw')
    with pytest.raises(InvalidCredentials):
        auth.login('ALICE', 'pw')


def test_duplicate_registration_keeps_one_user(auth):
    auth.register('alice', 'pw')
    with pytest.raises(DuplicateUser):
        auth.register('alice', 'other')
    assert auth.users.count() == 1


def test_unique_constraint_catches_duplicate_insert(auth):
    pw_hash = 'pbkdf2:sha256:1000$salt$hash'
    auth.users.insert('alice', pw_hash)
    # skips the lookup in register, as a concurrent registration would
    with pytest.raises(DuplicateUser):
        auth.users.insert('alice', pw_hash)
    assert auth.users.count() == 1
    # session was rolled back and is still usable
    auth.users.insert('bob', pw_hash)
    assert auth.users.count() == 2
    assert auth.users.find_by_username('alice').password_hash == pw_hash


def test_password_is_stored_hashed(auth):
    auth.register('alice', 'pw')
    user = auth.users.find_by_username('alice')
    assert user.password_hash != 'pw'
    assert user.password_hash.startswith('pbkdf2:sha256:1000$')


@pytest.mark.parametrize("username, password", [('', 'pw'), ('alice', ''), (None, 'pw'), ('   ', 'pw'), (3, 'pw')])
def test_register_requires_both_fields(auth, username, password):
    with pytest.raises(ValidationError):
        auth.register(username, password)


def test_validate_missing_token(auth):
    with pytest.raises(MissingCredential):
        auth.validate_credential(None)
    with pytest.raises(MissingCredential):
        auth.validate_credential('')


def test_validate_returns_embedded_identity(auth):
    assert auth.validate_credential(auth.issue_credential(42)) == Identity(id=42)


@pytest.mark.parametrize("token", ['garbage', 'a.b.c', 'eyJ1c2VyIjp7ImlkIjoxfX0.AAAA.BBBB'])
def test_validate_malformed_token(auth, token):
    with pytest.raises(InvalidCredential):
        auth.validate_credential(token)


def test_token_signed_with_other_secret_is_rejected(auth):
    other = AuthService(auth.users, 'someone-else')
    with pytest.raises(InvalidCredential):
        auth.validate_credential(other.issue_credential(1))


def test_token_without_user_payload_is_rejected(auth):
    token = auth._serializer.dumps({'nobody': True})
    with pytest.raises(InvalidCredential):
        auth.validate_credential(token)


def test_token_older_than_an_hour_is_rejected(auth, monkeypatch):
    with monkeypatch.context() as m:
        m.setattr(itsdangerous.timed, 'time', clock_shifted_by(3601 + 60))
        token = auth.issue_credential(1)
    with pytest.raises(InvalidCredential):
        auth.validate_credential(token)


def test_token_within_the_hour_is_accepted(auth, monkeypatch):
    with monkeypatch.context() as m:
        m.setattr(itsdangerous.timed, 'time', clock_shifted_by(30 * 60))
        token = auth.issue_credential(1)
    assert auth.validate_credential(token).id == 1
