"""
Password cipher for pod metadata.

Envelope format: base64(iv || ciphertext), with a fresh random 16-byte iv
per call, so encrypting the same text twice gives different envelopes.
There is no integrity check: a wrong password usually fails UTF-8 decoding
but may also decrypt to garbage.
"""
from typing import Optional
from Crypto.Random import get_random_bytes

from ..exceptions import DecryptionError
from ..logging import get_logger
from .encoding import Base64Encoder
from .key_derivation import PasswordKeyDeriver, SHA256KeyDeriver
from .strategies import CipherStrategy, AESCFBStrategy


class PasswordCipher:
    """
    Encrypts and decrypts text with a key derived from a password.

    Example:
        >>> cipher = PasswordCipher()
        >>> envelope = cipher.encrypt("secret", '{"pods": []}')
        >>> cipher.decrypt("secret", envelope)
        '{"pods": []}'
    """

    def __init__(
        self,
        key_deriver: Optional[PasswordKeyDeriver] = None,
        strategy: Optional[CipherStrategy] = None
    ):
        """Initializes cipher with a key deriver and cipher strategy."""
        self.key_deriver = key_deriver or SHA256KeyDeriver()
        self.strategy = strategy or AESCFBStrategy()
        self.encoder = Base64Encoder()
        self._logger = get_logger('fdpsync.crypto')

    def derive_key(self, password: str | bytes) -> bytes:
        """Derives the cipher key for a password."""
        return self.key_deriver.derive(password)

    def encrypt(self, password: str | bytes, text: str) -> str:
        """
        Encrypts text with password.

        Args:
            password: Password to derive the key from
            text: Plain text

        Returns:
            Base64 envelope
        """
        key = self.derive_key(password)
        iv = get_random_bytes(self.strategy.iv_size)
        encrypted = self.strategy.encrypt(text.encode('utf-8'), key, iv)
        return self.encoder.encode(iv + encrypted)

    def decrypt(self, password: str | bytes, envelope: str) -> str:
        """
        Decrypts an envelope with password.

        Args:
            password: Password to derive the key from
            envelope: Base64 envelope produced by encrypt()

        Returns:
            Plain text

        Raises:
            DecryptionError: If the envelope is malformed or the output is
                not valid UTF-8 (usually a wrong password)
        """
        try:
            contents = self.encoder.decode(envelope)
        except ValueError as e:
            raise DecryptionError(f"Malformed envelope: {e}") from e

        iv_size = self.strategy.iv_size
        if len(contents) < iv_size:
            raise DecryptionError(f"Envelope is shorter than {iv_size} bytes")

        iv, encrypted = contents[:iv_size], contents[iv_size:]
        key = self.derive_key(password)
        decrypted = self.strategy.decrypt(encrypted, key, iv)

        try:
            return decrypted.decode('utf-8')
        except UnicodeDecodeError as e:
            self._logger.debug("Decrypted data is not valid UTF-8")
            raise DecryptionError("Could not decrypt data, wrong password?") from e
