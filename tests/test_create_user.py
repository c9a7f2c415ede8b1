# File: tests/test_create_user.py

import pytest

import create_user
from app.models.user import User


@pytest.fixture
def script(db, monkeypatch):
    monkeypatch.setattr(create_user, "SessionLocal", lambda: db)
    monkeypatch.setattr(create_user, "init_db", lambda: None)
    monkeypatch.setattr(create_user, "setup_logging", lambda level: None)
    return create_user


def test_creates_user(script, db, capsys):
    code = script.main(["--username", "carol", "--email", "carol@example.com", "--password", "pw"])

    assert code == 0
    assert "Registered user carol" in capsys.readouterr().out
    assert User.find_by_username(db, "carol") is not None


def test_duplicate_username_fails(script, capsys):
    args = ["--username", "carol", "--email", "carol@example.com", "--password", "pw"]
    assert script.main(args) == 0

    assert script.main(args) == 1
    assert "already registered" in capsys.readouterr().err


def test_invalid_email_is_rejected_before_touching_the_db(script, db, capsys):
    code = script.main(["--username", "dave", "--email", "not-an-email", "--password", "pw"])

    assert code == 2
    assert "email" in capsys.readouterr().err
    assert User.find_by_username(db, "dave") is None
