from .otp import OTP


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(self, s: str, initial_count: int = 0) -> None:
        """
        :param s: secret in base32 format
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = initial_count
        super().__init__(s=s)

    def at(self, count: int) -> int:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP as a number
        """
        counter = self.initial_count + count
        if counter < 0:
            raise ValueError("counter must be a non-negative integer")
        return self.generate_otp(counter)
