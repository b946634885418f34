import pytest

# RFC 6238 / RFC 4226 test key: base32 of ASCII "12345678901234567890"
RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.fixture
def rfc_secret() -> str:
    return RFC_SECRET
