"""
Errors raised while handling index actions.

Each error carries the message and context tag that end up in the error
envelope:
- RegistrationDisabled: registration off, bad token, empty/duplicate name
- LoginDisabled: login off or credential mismatch
- LoginFailed: name-based login with an unknown team name
- InvalidInput: unknown action, missing field or malformed roster
"""


class HandlerError(Exception):
    """Base exception for all index action errors."""

    message = "Invalid action"
    context = "index"

    def __init__(self, reason: str = None):
        super().__init__(reason or self.message)
        self.reason = reason


class RegistrationDisabled(HandlerError):
    message = "Registration failed"
    context = "registration"


class LoginDisabled(HandlerError):
    message = "Login failed"
    context = "login"


class LoginFailed(HandlerError):
    message = "Login failed"
    context = "login"


class InvalidInput(HandlerError):
    message = "Invalid action"
    context = "index"
