"""Ports for admin credential handling."""

from abc import ABC, abstractmethod


class SessionTokenCodec(ABC):
    """Issues and verifies signed admin session tokens."""

    @abstractmethod
    def encode(self, admin_id: int) -> str:
        """Return a signed token carrying the admin id and an expiry."""
        ...

    @abstractmethod
    def decode(self, token: str) -> int:
        """Return the admin id carried by a valid token.

        Raises:
            UnauthenticatedError: malformed, expired or badly signed token.
        """
        ...


class PasswordHasher(ABC):
    """One-way hashing for admin passwords."""

    @abstractmethod
    def hash(self, password: str) -> str:
        ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        ...
