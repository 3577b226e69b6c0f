"""
Admin session state.

Login is a literal comparison against one fixed credential pair. It only
decides whether the admin pages render; nothing on the server checks it.
Treat it as a convenience gate, not as security.

The token is an opaque, timestamp-derived string kept in client storage.
Its presence is the whole authorization signal: it is never validated and
never expires until logout().
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from recipebook.storage import ClientStorage

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin"

TOKEN_KEY = "auth_token"

# Emulates the round trip of a real login call
DEFAULT_LOGIN_DELAY_SECONDS = 0.3

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


@dataclass
class LoginResult:
    """
    Outcome of a login attempt.

    Attributes:
        ok: True when the credentials matched
        token: Session token on success, None otherwise
        message: Human-readable reason on failure, "" on success
    """
    ok: bool
    token: Optional[str] = None
    message: str = ""


class AuthSession:
    """Login state for one client, persisted in the given storage."""

    def __init__(self, storage: ClientStorage, delay: float = DEFAULT_LOGIN_DELAY_SECONDS):
        self.storage = storage
        self.delay = delay

    def login(self, username: str, password: str) -> LoginResult:
        if self.delay > 0:
            time.sleep(self.delay)

        if username == ADMIN_USERNAME and password == ADMIN_PASSWORD:
            token = f"session_{int(time.time() * 1000)}"
            self.storage.set_item(TOKEN_KEY, token)
            logger.info("Admin login succeeded")
            return LoginResult(ok=True, token=token)

        logger.info("Admin login rejected for user %r", username)
        return LoginResult(ok=False, message=INVALID_CREDENTIALS_MESSAGE)

    def logout(self) -> None:
        self.storage.remove_item(TOKEN_KEY)

    def is_authenticated(self) -> bool:
        return bool(self.storage.get_item(TOKEN_KEY))
