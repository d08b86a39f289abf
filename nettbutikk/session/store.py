"""Session store: at most one logged-in user, no real authentication."""
from typing import Optional

from nettbutikk.logging import get_logger, sanitize_string_for_logging
from nettbutikk.models import User
from nettbutikk.observable import Observable

logger = get_logger(__name__)


class SessionStore(Observable[Optional[User]]):
    """
    Holds the current user.

    Two states: anonymous (None) and authenticated. login always succeeds and
    silently replaces any previous user; logout always succeeds.
    """

    def __init__(self) -> None:
        super().__init__()
        self._current_user: Optional[User] = None

    def snapshot(self) -> Optional[User]:
        return self._current_user

    def current_user(self) -> Optional[User]:
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def login(self, username: str, password: str) -> None:
        # Credentials are accepted as given
        self._current_user = User(username=username, password=password)
        logger.info(f"User logged in: {sanitize_string_for_logging(username)}")
        self._publish()

    def logout(self) -> None:
        if self._current_user is not None:
            logger.info(f"User logged out: {sanitize_string_for_logging(self._current_user.username)}")
        self._current_user = None
        self._publish()
