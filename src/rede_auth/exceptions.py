"""Authentication exceptions.

Raised by the rede_auth package and handled by the application layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet length requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)
