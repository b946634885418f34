import base64
import binascii
import hashlib
import hmac
import logging
import struct

from .exceptions import InvalidSecret

log = logging.getLogger(__name__)

DIGITS = 6

B32_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")


def decode_secret(secret: str) -> bytes:
    """
    Decodes an unpadded RFC 4648 Base32 secret into raw key bytes.

    :param secret: the secret in canonical (upper case, unpadded) base32
    :returns: the HMAC key
    :raises InvalidSecret: if the text is not base32 or decodes to nothing
    """
    if not secret:
        raise InvalidSecret("secret must not be empty")
    if not B32_ALPHABET.issuperset(secret):
        log.debug("Rejected secret: characters outside the base32 alphabet")
        raise InvalidSecret("secret is not valid base32")

    # b32decode insists on padding, the otpauth convention leaves it off
    missing_padding = len(secret) % 8
    if missing_padding != 0:
        secret += "=" * (8 - missing_padding)
    try:
        key = base64.b32decode(secret)
    except binascii.Error as e:
        log.debug("Rejected secret: %s", e)
        raise InvalidSecret("secret is not valid base32") from e

    if not key:
        raise InvalidSecret("secret decodes to an empty key")
    return key


def dynamic_truncate(hmac_hash: bytes) -> int:
    """
    RFC 4226 section 5.3 dynamic truncation.

    The low nibble of the last byte picks an offset, the four bytes from
    there are read big-endian and the top bit is dropped.

    :param hmac_hash: the HMAC-SHA1 digest
    :returns: a 31-bit unsigned integer
    """
    if len(hmac_hash) < 20:
        raise ValueError("digest must be at least 20 bytes")
    offset = hmac_hash[-1] & 0xF
    (code,) = struct.unpack(">I", hmac_hash[offset : offset + 4])
    return code & 0x7FFFFFFF


class OTP(object):
    """
    Base class for OTP handlers.
    """

    digits = DIGITS

    def __init__(self, s: str) -> None:
        """
        :param s: secret in base32 format
        """
        self.secret = s

    def generate_otp(self, input: int) -> int:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        :returns: the code as a number in [0, 10**digits); callers pad it for display
        """
        hasher = hmac.new(self.byte_secret(), self.int_to_bytestring(input), hashlib.sha1)
        return dynamic_truncate(hasher.digest()) % 10**self.digits

    def byte_secret(self) -> bytes:
        return decode_secret(self.secret)

    @staticmethod
    def int_to_bytestring(i: int) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        # Negative counters wrap like an unsigned 64-bit conversion
        return struct.pack(">Q", i & 0xFFFFFFFFFFFFFFFF)
