"""Hashing helpers."""
from typing import Union
from Crypto.Hash import keccak

Message = Union[str, bytes, bytearray]


def keccak256_hash(*messages: Message) -> bytes:
    """
    Keccak-256 digest of the concatenated messages.

    Strings are hashed as their UTF-8 bytes.

    Returns:
        32-byte digest
    """
    hasher = keccak.new(digest_bits=256)
    for message in messages:
        hasher.update(message.encode('utf-8') if isinstance(message, str) else bytes(message))
    return hasher.digest()
