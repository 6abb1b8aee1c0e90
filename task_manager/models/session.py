"""Session model for the login gate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """The single authentication flag and current username."""

    is_authenticated: bool = False
    current_user: str = ""

    @classmethod
    def logged_in(cls, username: str) -> 'Session':
        """Create an authenticated session for a user."""
        return cls(is_authenticated=True, current_user=username)


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a login attempt."""

    success: bool
    error: str = ""
