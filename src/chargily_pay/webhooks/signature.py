"""
Webhook signature helpers.

Chargily signs every webhook body with HMAC-SHA256 keyed by the account's
secret API key and sends the hex digest in the ``signature`` header. The
digest is computed over the raw body bytes exactly as received; a body
re-serialized from parsed JSON will not match.
"""

import hashlib
import hmac
import logging
from typing import Optional, Union

from ..constants import SIGNATURE_PREFIX
from ..engine.exceptions import SignatureMismatchError


logger = logging.getLogger(__name__)


def _to_bytes(value: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def compute_signature(
    payload: Union[bytes, bytearray, str],
    secret_key: str,
    *,
    prefix: str = SIGNATURE_PREFIX,
) -> str:
    """
    Compute the signature Chargily sends for a webhook body.

    Args:
        payload: Raw request body.
        secret_key: Secret API key of the account.
        prefix: Scheme marker prepended to the hex digest.

    Returns:
        ``prefix`` followed by the hex HMAC-SHA256 digest.
    """
    digest = hmac.new(
        key=_to_bytes(secret_key),
        msg=_to_bytes(payload),
        digestmod=hashlib.sha256,
    ).hexdigest()
    return f"{prefix}{digest}"


def verify_signature(
    payload: Union[bytes, bytearray, str],
    signature: Optional[str],
    secret_key: str,
    *,
    prefix: str = SIGNATURE_PREFIX,
) -> bool:
    """
    Verify the signature of an incoming webhook request.

    Args:
        payload: Raw request body, exactly as received.
        signature: Value of the signature header, as a hex string.
        secret_key: Secret API key of the account.
        prefix: Scheme marker expected before the hex digest.

    Returns:
        False if no signature was supplied, True if it matches.

    Raises:
        SignatureMismatchError: If a signature was supplied but differs from
            the computed one, including a length difference.
    """
    if not signature:
        return False

    expected = compute_signature(payload, secret_key, prefix=prefix).encode("utf-8")
    received = signature.encode("utf-8")

    if len(received) != len(expected) or not hmac.compare_digest(expected, received):
        raise SignatureMismatchError("The signature is invalid.")

    logger.debug("Webhook signature is valid")
    return True
