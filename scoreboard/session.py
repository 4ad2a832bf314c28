"""
Per-request session context
Wraps the cookie-backed session mapping so login logic never touches globals
"""
import base64
import secrets
import time
from typing import Any, MutableMapping, Optional


CSRF_TOKEN_BYTES = 16


def generate_csrf_token() -> str:
    """Fresh CSRF token: 16 secure random bytes, base64-encoded"""
    return base64.b64encode(secrets.token_bytes(CSRF_TOKEN_BYTES)).decode("ascii")


class SessionContext:
    """
    Session state for one caller

    Args:
        data: Backing mapping (request.session under SessionMiddleware)
        remote_addr: Caller network address
    """

    def __init__(self, data: Optional[MutableMapping[str, Any]] = None, remote_addr: str = "unknown"):
        self.data = data if data is not None else {}
        self.remote_addr = remote_addr

    def start(self) -> None:
        """Open the session (records when it was first started)"""
        self.data.setdefault("started_ts", time.time())

    def active(self) -> bool:
        """A session is active once a team is logged into it"""
        return "team_id" in self.data

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def clear(self) -> None:
        self.data.clear()

    def is_admin(self) -> bool:
        return self.active() and bool(self.data.get("admin"))
