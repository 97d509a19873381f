"""
Exception and Error Definitions Module

Defines the exception hierarchy raised by the Chargily Pay client and the
webhook helpers. Every failure is surfaced to the caller as a distinct
type; nothing is retried or recovered inside the SDK.

Exception Hierarchy:
    ChargilyError (root)
    ├── ValidationError
    ├── ConfigurationError
    ├── ApiError
    │   ├── HttpError
    │   ├── TransportError
    │   └── DeserializationError
    └── SignatureMismatchError
"""

from typing import Optional


class ChargilyError(Exception):
    """
    Root exception class for all SDK exceptions.

    Catch this to handle every error raised by the client or the webhook
    helpers in one place.
    """
    pass


class ValidationError(ChargilyError):
    """
    Raised when a request is rejected locally, before any network call.

    This includes scenarios such as:
    - Checkout success_url not starting with http/https
    - Checkout without items and without amount + currency
    - Empty endpoint path or unsupported HTTP verb
    """
    pass


class ConfigurationError(ChargilyError):
    """
    Raised when client configuration is missing or invalid.

    This includes scenarios such as:
    - Unknown API mode (anything other than "live" or "test")
    - Missing API key
    """
    pass


class ApiError(ChargilyError):
    """
    Base exception for failures of a dispatched API request.

    Parent class for HTTP status, transport and decoding errors.
    """
    pass


class HttpError(ApiError):
    """
    Raised when the API answers with a status outside 200-299.

    The response body is not parsed.

    Attributes:
        status_code: Numeric HTTP status received
        status_text: Reason phrase of the status
        method: HTTP verb of the failed request
        url: Full URL of the failed request
    """

    def __init__(
        self,
        status_code: int,
        status_text: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.status_code = status_code
        self.status_text = status_text
        self.method = method
        self.url = url
        super().__init__(
            f"API request failed with status {status_code}: {status_text}"
        )


class TransportError(ApiError):
    """
    Raised when the request never produced a response.

    Wraps connection errors, DNS failures and timeouts. The underlying
    exception is kept on ``cause`` and chained as ``__cause__``.

    Attributes:
        cause: The original transport exception
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class DeserializationError(ApiError):
    """
    Raised when a body cannot be decoded into the expected JSON value.

    Covers successful API responses that are not valid JSON and webhook
    payloads that are not event objects.
    """
    pass


class SignatureMismatchError(ChargilyError):
    """
    Raised when a webhook signature is present but does not match.

    A missing signature is not an error for ``verify_signature``; it
    returns False instead.
    """
    pass
