"""
Fixed values shared by the client and the webhook helpers.
"""

CHARGILY_LIVE_URL = "https://pay.chargily.net/api/v2"
CHARGILY_TEST_URL = "https://pay.chargily.net/test/api/v2"

DEFAULT_PER_PAGE = 10

# Webhook signing
SIGNATURE_HEADER = "signature"
SIGNATURE_HASH_ALGORITHM = "sha256"
# Some gateways prepend a scheme marker such as "sha256=". Chargily sends the bare hex digest.
SIGNATURE_PREFIX = ""
