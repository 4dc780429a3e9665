from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError


@dataclass(frozen=True)
class SessionUser:
    username: str
    name: str
    role: str

    def to_dict(self) -> dict:
        return {"username": self.username, "name": self.name, "role": self.role}


class AuthService:
    """Use case: demo login against a single configured account.

    No route requires a login; this only backs the login form.
    """

    def __init__(self, username: str, password: str):
        self._username = username
        self._password_hash = generate_password_hash(password)

    def authenticate(self, username: str, password: str) -> SessionUser:
        username = require_non_empty(username, "Username")
        if username != self._username or not check_password_hash(self._password_hash, password or ""):
            raise AuthenticationError("Invalid username or password")

        return SessionUser(username=username, name="Administrator", role="admin")
