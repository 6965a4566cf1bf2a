"""Encoding utilities."""
import base64
import binascii


class Base64Encoder:
    """Standard Base64 encoder/decoder for cipher envelopes."""

    @staticmethod
    def encode(data: bytes) -> str:
        """Encodes bytes to padded standard Base64."""
        return base64.b64encode(data).decode('ascii')

    @staticmethod
    def decode(data: str) -> bytes:
        """
        Decodes standard Base64.

        Raises:
            ValueError: If data is not valid Base64
        """
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, TypeError) as e:
            raise ValueError(f"Invalid Base64 data: {e}") from e
