"""
Base Schema Models for the Chargily Pay SDK

This module defines the base classes every request and resource model
inherits from.

Core Classes:
    - ChargilyModel: Pydantic base with JSON-ready dumping helpers
    - PassThroughModel: Response model that keeps mismatched values raw
    - ResourceModel: Pass-through model for objects returned by the API
    - RequestParams: Base for create/update payloads sent to the API

Resource models never reject a response: the remote API owns the shape of
its objects, so unknown fields are kept and every declared field is
optional. Request params drop unset fields when serialized so that partial
updates only carry what the caller provided.

Dependencies:
    - pydantic: For data validation and serialization
"""

import json
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError


class ChargilyModel(BaseModel):
    """
    Pydantic base model with helpers for JSON transport.

    Example:
        class MyModel(ChargilyModel):
            name: str
            value: int

        model = MyModel(name="test", value=123)
        model.to_json()  # '{"name":"test","value":123}'
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert model to a JSON-compatible dictionary without unset values.

        Returns:
            Dict[str, Any]: Dictionary with every non-None field.
        """
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        """
        Convert model to a compact JSON string.

        Returns:
            str: JSON string without extra whitespace.
        """
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


class PassThroughModel(ChargilyModel):
    """
    Base class for every model built from an API response.

    A field whose value does not fit its declared type keeps the raw JSON
    value instead of failing, so a response is never rejected for its shape.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("*", mode="wrap")
    @classmethod
    def _keep_raw_on_mismatch(cls, value, handler):
        try:
            return handler(value)
        except PydanticValidationError:
            return value


class ResourceModel(PassThroughModel):
    """
    Base class for objects returned by the API.

    Attributes:
        id: Identifier of the object
        entity: Object type name reported by the API (e.g. "customer")
        livemode: Whether the object lives in live mode
        created_at: Creation timestamp (unix seconds)
        updated_at: Last update timestamp (unix seconds)
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = None
    entity: Optional[str] = None
    livemode: Optional[bool] = None
    created_at: Optional[Union[int, str]] = None
    updated_at: Optional[Union[int, str]] = None


class RequestParams(ChargilyModel):
    """
    Base class for payloads sent on create and update calls.

    Extra keys are forwarded as-is so newer API fields can be sent before
    the SDK models them.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")
