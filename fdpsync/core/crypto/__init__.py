"""Crypto module: password cipher and hashing helpers."""
from .encoding import Base64Encoder
from .hashing import keccak256_hash
from .key_derivation import PasswordKeyDeriver, SHA256KeyDeriver
from .strategies import CipherStrategy, AESCFBStrategy
from .cipher import PasswordCipher

_cipher = PasswordCipher()


def derive_key(password):
    """Derives the 32-byte cipher key for a password."""
    return _cipher.derive_key(password)


def encrypt(password, text):
    """Encrypts text with password into a Base64 envelope."""
    return _cipher.encrypt(password, text)


def decrypt(password, envelope):
    """Decrypts a Base64 envelope with password."""
    return _cipher.decrypt(password, envelope)


__all__ = [
    'Base64Encoder',
    'keccak256_hash',
    'PasswordKeyDeriver',
    'SHA256KeyDeriver',
    'CipherStrategy',
    'AESCFBStrategy',
    'PasswordCipher',
    'derive_key',
    'encrypt',
    'decrypt',
]
