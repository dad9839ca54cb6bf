from __future__ import annotations

import hmac

from ..core.exceptions import AuthenticationError


class AdminAuthService:
    """Use case: admin unlock.

    A static shared secret gates the admin screens; it is not a security boundary.
    """

    def __init__(self, password: str):
        self._password = password

    def authenticate(self, password: str) -> None:
        if not password or not hmac.compare_digest(str(password).encode(), self._password.encode()):
            raise AuthenticationError("Invalid Password")
