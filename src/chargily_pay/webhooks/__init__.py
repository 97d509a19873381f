from .signature import compute_signature, verify_signature
from .events import (
    WebhookEvent,
    construct_event,
    CHECKOUT_PAID,
    CHECKOUT_FAILED,
    CHECKOUT_CANCELED,
)
from .dependencies import WebhookVerifier

__all__ = [
    "compute_signature",
    "verify_signature",
    "WebhookEvent",
    "construct_event",
    "CHECKOUT_PAID",
    "CHECKOUT_FAILED",
    "CHECKOUT_CANCELED",
    "WebhookVerifier",
]
