"""Symmetric cipher strategies using Strategy Pattern."""
from abc import ABC, abstractmethod
from Crypto.Cipher import AES

IV_SIZE = 16


class CipherStrategy(ABC):
    """Abstract base class for IV-based symmetric ciphers."""

    iv_size: int = IV_SIZE

    @abstractmethod
    def encrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
        """Encrypts data."""
        pass

    @abstractmethod
    def decrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
        """Decrypts data."""
        pass


class AESCFBStrategy(CipherStrategy):
    """AES-CFB with 128-bit segments (OpenSSL "aes-256-cfb" with a 32-byte key)."""

    segment_size = 128

    def encrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
        """Encrypts data using AES-CFB mode."""
        cipher = AES.new(key, AES.MODE_CFB, iv=iv, segment_size=self.segment_size)
        return cipher.encrypt(data)

    def decrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
        """Decrypts data using AES-CFB mode."""
        cipher = AES.new(key, AES.MODE_CFB, iv=iv, segment_size=self.segment_size)
        return cipher.decrypt(data)
