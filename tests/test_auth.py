# File: tests/test_auth.py

from app.services.auth_service import authenticate_user, register_user


def test_register_then_authenticate(db):
    user = register_user(db, username="foo", email="foo@bar.com", password="test")

    assert user.id is not None
    assert authenticate_user(db, username="foo", password="test") is user


def test_wrong_password_returns_none(db):
    register_user(db, username="foo", email="foo@bar.com", password="test")

    assert authenticate_user(db, username="foo", password="nope") is None


def test_unknown_username_returns_none(db):
    assert authenticate_user(db, username="ghost", password="test") is None
