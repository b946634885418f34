import logging

from .exceptions import InvalidSecret as InvalidSecret
from .hotp import HOTP as HOTP
from .otp import DIGITS as DIGITS
from .otp import OTP as OTP
from .otp import decode_secret as decode_secret
from .otp import dynamic_truncate as dynamic_truncate
from .totp import INTERVAL as INTERVAL
from .totp import TOTP as TOTP
from .totp import format_code as format_code
from .totp import generate as generate
from .totp import get_token as get_token

logging.getLogger(__name__).addHandler(logging.NullHandler())
