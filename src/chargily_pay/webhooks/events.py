"""
Typed webhook events.

Chargily posts an ``event`` object whose ``data`` is the checkout that
changed state. ``construct_event`` only parses bodies whose signature has
been verified.
"""

import json
from typing import Optional, Union

from pydantic import ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..engine.exceptions import DeserializationError, SignatureMismatchError
from ..schemas.bases import ResourceModel
from ..schemas.resources import Checkout
from .signature import verify_signature


CHECKOUT_PAID = "checkout.paid"
CHECKOUT_FAILED = "checkout.failed"
CHECKOUT_CANCELED = "checkout.canceled"


class WebhookEvent(ResourceModel):
    """Event delivered to a webhook endpoint.

    Attributes:
        type: Event name, e.g. ``checkout.paid``
        data: The checkout the event is about
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: Optional[str] = None
    data: Optional[Checkout] = None

    @property
    def is_paid(self) -> bool:
        return self.type == CHECKOUT_PAID


def construct_event(
    payload: Union[bytes, bytearray, str],
    signature: Optional[str],
    secret_key: str,
) -> WebhookEvent:
    """
    Verify a webhook body and parse it into a WebhookEvent.

    Args:
        payload: Raw request body, exactly as received.
        signature: Value of the signature header.
        secret_key: Secret API key of the account.

    Returns:
        The parsed event.

    Raises:
        SignatureMismatchError: If the signature is missing or wrong.
        DeserializationError: If the body is not a JSON event object.
    """
    if not verify_signature(payload, signature, secret_key):
        raise SignatureMismatchError("The webhook request carries no signature.")

    try:
        data = json.loads(payload)
    except ValueError as e:
        raise DeserializationError("Webhook body is not valid JSON") from e

    try:
        return WebhookEvent.model_validate(data)
    except PydanticValidationError as e:
        raise DeserializationError(f"Webhook body is not an event object: {e}") from e
