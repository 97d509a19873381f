from .exceptions import (
    ChargilyError,
    ValidationError,
    ConfigurationError,
    ApiError,
    HttpError,
    TransportError,
    DeserializationError,
    SignatureMismatchError,
)

__all__ = [
    "ChargilyError",
    "ValidationError",
    "ConfigurationError",
    "ApiError",
    "HttpError",
    "TransportError",
    "DeserializationError",
    "SignatureMismatchError",
]
