from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: str
    email: str
    password: str  # plaintext, compared as-is at login


@dataclass(frozen=True)
class Identity:
    """The part of a user carried inside a token."""

    id: str
    email: str
