"""
Chargily Pay SDK

Async client for the Chargily Pay v2 API and helpers to verify the
webhooks it sends.
"""

from .clients import ChargilyClient
from .config import ChargilySettings
from .constants import CHARGILY_LIVE_URL, CHARGILY_TEST_URL
from .engine.exceptions import (
    ChargilyError,
    ValidationError,
    ConfigurationError,
    ApiError,
    HttpError,
    TransportError,
    DeserializationError,
    SignatureMismatchError,
)
from .schemas.modes import ApiMode
from .webhooks import (
    WebhookEvent,
    WebhookVerifier,
    compute_signature,
    construct_event,
    verify_signature,
)

__version__ = "0.1.0"

__all__ = [
    "ChargilyClient",
    "ChargilySettings",
    "ApiMode",
    "CHARGILY_LIVE_URL",
    "CHARGILY_TEST_URL",
    "ChargilyError",
    "ValidationError",
    "ConfigurationError",
    "ApiError",
    "HttpError",
    "TransportError",
    "DeserializationError",
    "SignatureMismatchError",
    "WebhookEvent",
    "WebhookVerifier",
    "compute_signature",
    "construct_event",
    "verify_signature",
]
