"""
HTTP Request Schema Models for the Chargily Pay client

These models describe a single outgoing request: the headers every call
carries, the structured path of the endpoint, and the transient descriptor
handed to the dispatcher.

Request flow:
1. A resource method builds a ResourcePath (resource, optional ID,
   optional action, optional query)
2. The path, verb and body form a RequestDescriptor
3. The dispatcher adds ClientRequestHeader and sends it
"""

from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Request Headers
# ============================================================================

class ClientRequestHeader(BaseModel):
    """HTTP request headers sent with every API call.

    Attributes:
        content_type: MIME type of request body (always application/json).
        authorization: Bearer credential built from the API key.
    """
    model_config = ConfigDict(populate_by_name=True)
    content_type: str = Field(default="application/json", alias="Content-Type")
    authorization: str = Field(..., alias="Authorization", repr=False)

    @classmethod
    def for_api_key(cls, api_key: str) -> "ClientRequestHeader":
        return cls(authorization=f"Bearer {api_key}")


# ============================================================================
# Endpoint paths
# ============================================================================

class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ResourcePath(BaseModel):
    """Structured endpoint path relative to the API base URL.

    IDs are percent-encoded as one path segment, so an ID can never add
    segments or a query string of its own.

    Example:
        ResourcePath(resource="products", resource_id="01hj", action="prices",
                     query={"per_page": 10}).render()
        # 'products/01hj/prices?per_page=10'
    """
    resource: str = Field(..., min_length=1)
    resource_id: Optional[str] = None
    action: Optional[str] = None
    query: Dict[str, Any] = Field(default_factory=dict)

    def render(self) -> str:
        segments = [self.resource]
        if self.resource_id is not None:
            segments.append(quote(str(self.resource_id), safe=""))
        if self.action:
            segments.append(self.action)
        path = "/".join(segments)
        if self.query:
            path = f"{path}?{urlencode(self.query)}"
        return path

    def __str__(self) -> str:
        return self.render()


class RequestDescriptor(BaseModel):
    """One outgoing request, built per call and never stored.

    Attributes:
        path: Endpoint path relative to the base URL.
        method: HTTP verb.
        body: JSON-serializable payload, or None for no body.
    """
    path: str = Field(..., min_length=1)
    method: HttpMethod = HttpMethod.GET
    body: Optional[Any] = None
