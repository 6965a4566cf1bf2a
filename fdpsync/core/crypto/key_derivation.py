"""Password-based key derivation using Strategy Pattern."""
from abc import ABC, abstractmethod
import hashlib


class PasswordKeyDeriver(ABC):
    """Abstract base class for password-based key derivation."""

    @abstractmethod
    def derive(self, password: str | bytes) -> bytes:
        """Derives a key from a password."""
        pass


class SHA256KeyDeriver(PasswordKeyDeriver):
    """
    Unsalted SHA-256 key derivation.

    The same password always yields the same 32-byte key, so a password
    reused in another context yields the same key there too.
    """

    key_size = 32

    def derive(self, password: str | bytes) -> bytes:
        """Derives key as SHA-256 of the UTF-8 password."""
        if isinstance(password, str):
            password = password.encode('utf-8')
        return hashlib.sha256(password).digest()
