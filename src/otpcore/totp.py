import datetime
import logging
import time
from typing import Union

from .otp import DIGITS, OTP

log = logging.getLogger(__name__)

INTERVAL = 30


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    interval = INTERVAL

    def at(self, for_time: Union[int, float, datetime.datetime]) -> int:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :returns: OTP as a number, not padded
        """
        return self.generate_otp(self.timecode(for_time))

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP as a zero-padded string
        """
        return format_code(self.at(time.time()))

    def timecode(self, for_time: Union[int, float, datetime.datetime]) -> int:
        """
        Accepts either a timezone naive (`for_time.tzinfo is None`) or
        a timezone aware datetime as argument and returns the
        corresponding counter value (timecode).

        Naive datetimes are read as local time.
        """
        if isinstance(for_time, datetime.datetime):
            for_time = for_time.timestamp()
        # floor division rounds toward negative infinity for pre-epoch times too
        counter = int(for_time // self.interval)
        log.debug("Derived TOTP counter %d", counter)
        return counter


def format_code(code: int) -> str:
    """
    Zero-pads a numeric code to the fixed display width.

    >>> format_code(81804)
    '081804'
    """
    if not 0 <= code < 10**DIGITS:
        raise ValueError("code must be in the range [0, {}]".format(10**DIGITS - 1))
    return str(10**DIGITS + code)[-DIGITS:]


def generate(secret: str, timestamp: Union[int, float, datetime.datetime]) -> int:
    """
    Computes the TOTP code for a Base32 secret at a given Unix timestamp.

    :param secret: the shared secret in unpadded base32
    :param timestamp: seconds since the epoch, or a datetime
    :returns: the code as a number in [0, 999999]
    :raises InvalidSecret: if the secret is not valid base32 or is empty
    """
    return TOTP(secret).at(timestamp)


def get_token(secret: str) -> str:
    """
    Returns the six digit display code for the current time.
    """
    return TOTP(secret).now()
