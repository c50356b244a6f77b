from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Identity:
    """The resolved caller of a request, handed to views explicitly."""
    user_id: int
    email: str
    session_token: Optional[str] = None

    is_authenticated = True


@dataclass(frozen=True)
class AnonymousIdentity:
    """Marker for a request without a valid session."""
    is_authenticated = False
    user_id = None
    email = None
    session_token = None


ANONYMOUS = AnonymousIdentity()
