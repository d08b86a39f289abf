"""
Tests for SessionStore
"""

from nettbutikk.models import User
from nettbutikk.session import SessionStore


class TestSessionStore:
    """Login/logout state transitions."""

    def test_starts_anonymous(self):
        session = SessionStore()

        assert session.current_user() is None
        assert session.is_authenticated is False

    def test_login_sets_user(self):
        session = SessionStore()
        session.login("aksel", "hunter2")

        assert session.current_user() == User(username="aksel", password="hunter2")
        assert session.is_authenticated is True

    def test_logout_clears_user(self):
        session = SessionStore()
        session.login("aksel", "hunter2")
        session.logout()

        assert session.current_user() is None
        assert session.is_authenticated is False

    def test_login_overwrites_previous_user(self):
        session = SessionStore()
        session.login("first", "pw1")
        session.login("second", "pw2")

        assert session.current_user() == User(username="second", password="pw2")

    def test_logout_when_anonymous_is_allowed(self):
        session = SessionStore()
        session.logout()
        assert session.current_user() is None

    def test_any_credentials_accepted(self):
        session = SessionStore()
        session.login("", "")
        assert session.is_authenticated is True

    def test_notifies_on_login_and_logout(self):
        session = SessionStore()
        received = []
        session.subscribe(received.append)

        session.login("aksel", "hunter2")
        session.logout()

        assert received == [User(username="aksel", password="hunter2"), None]

    def test_username_with_newline_is_accepted(self):
        session = SessionStore()
        session.login("evil\nINFO - forged", "pw")
        assert session.current_user().username == "evil\nINFO - forged"
