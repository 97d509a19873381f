"""
Chargily Pay API Client

Provides an httpx-based async client for the Chargily Pay v2 REST API.
Every resource method funnels into a single dispatcher that adds the bearer
credential, sends one request and turns the response into parsed JSON or a
typed exception.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..config import ChargilySettings
from ..constants import DEFAULT_PER_PAGE
from ..engine.exceptions import (
    ConfigurationError,
    DeserializationError,
    HttpError,
    TransportError,
    ValidationError,
)
from ..schemas.https import ClientRequestHeader, RequestDescriptor, ResourcePath
from ..schemas.modes import ApiMode
from ..schemas.params import (
    CreateCheckoutParams,
    CreateCustomerParams,
    CreatePaymentLinkParams,
    CreatePriceParams,
    CreateProductParams,
    UpdateCustomerParams,
    UpdatePaymentLinkParams,
    UpdatePriceParams,
    UpdateProductParams,
)
from ..schemas.resources import (
    Balance,
    Checkout,
    CheckoutItem,
    Customer,
    DeleteItemResponse,
    ListResponse,
    PaymentLink,
    PaymentLinkItem,
    Price,
    Product,
)


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ChargilyClient(httpx.AsyncClient):
    """
    Async client for the Chargily Pay API.

    Extends httpx.AsyncClient, so every httpx option (transport, timeout,
    event hooks, limits) is accepted and the client is used as an async
    context manager. The API key is held by the instance only; two clients
    with different credentials never share state.

    Usage:
        ```python
        async with ChargilyClient(api_key="test_sk_...", mode="test") as client:
            checkout = await client.create_checkout({
                "amount": 2500,
                "currency": "dzd",
                "success_url": "https://shop.example.com/thanks",
            })
            print(checkout.checkout_url)
        ```
    """

    def __init__(
        self,
        api_key: str,
        mode: Union[str, ApiMode] = ApiMode.TEST,
        **kwargs
    ):
        """
        Initialize client for one account and mode.

        Args:
            api_key: Secret API key of the Chargily account
            mode: "live" or "test", selects the base URL
            **kwargs: All standard httpx.AsyncClient arguments (timeout, transport, etc.)

        Raises:
            ConfigurationError: If the key is empty or the mode is unknown
        """
        if not api_key:
            raise ConfigurationError("An API key is required")
        self._mode = ApiMode.from_string(mode)
        super().__init__(**kwargs)
        self._api_key = api_key
        self._api_url = self._mode.base_url

    @classmethod
    def from_settings(cls, settings: ChargilySettings, **kwargs) -> "ChargilyClient":
        """Build a client from a ChargilySettings instance."""
        return cls(api_key=settings.api_key, mode=settings.mode, **kwargs)

    @property
    def mode(self) -> ApiMode:
        return self._mode

    @property
    def api_url(self) -> str:
        return self._api_url

    # =========================================================================
    # Request dispatch
    # =========================================================================

    async def dispatch(
        self,
        path: Union[str, ResourcePath],
        method: str = "GET",
        body: Optional[Any] = None,
    ) -> Any:
        """
        Perform one authenticated round trip and return the parsed JSON body.

        Flow:
            1. Build the request descriptor and headers
            2. Send the request once, without retries
            3. Reject non-2xx statuses, then decode the body

        Args:
            path: Endpoint path relative to the base URL, joined with "/"
            method: HTTP verb, GET when omitted
            body: JSON-serializable payload or pydantic model, None for no body

        Returns:
            The decoded JSON response body

        Raises:
            ValidationError: If the path is empty, the verb unsupported or the body not serializable
            HttpError: If the status is outside 200-299
            TransportError: If no response was received
            DeserializationError: If the response body is not valid JSON
        """
        descriptor = self._describe(path, method, body)
        url = f"{self._api_url}/{descriptor.path}"
        verb = descriptor.method.value
        content = self._encode_body(descriptor.body) if descriptor.body is not None else None

        logger.debug("Chargily request %s %s", verb, url)
        try:
            response = await self.request(
                verb,
                url,
                headers=self._build_headers(),
                content=content,
            )
        except httpx.RequestError as e:
            logger.warning("Chargily request %s %s failed: %r", verb, url, e)
            raise TransportError(f"Failed to make API request: {e!r}", cause=e) from e

        if not response.is_success:
            logger.warning(
                "Chargily request %s %s returned %s %s",
                verb, url, response.status_code, response.reason_phrase,
            )
            raise HttpError(response.status_code, response.reason_phrase, verb, url)

        try:
            return response.json()
        except ValueError as e:
            raise DeserializationError(f"Response from {verb} {url} is not valid JSON") from e

    def _describe(
        self,
        path: Union[str, ResourcePath],
        method: str,
        body: Optional[Any],
    ) -> RequestDescriptor:
        if isinstance(path, ResourcePath):
            path = path.render()
        try:
            return RequestDescriptor(path=path, method=str(method).upper(), body=body)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid request {method!r} {path!r}: {e}") from e

    def _build_headers(self) -> Dict[str, str]:
        header_model = ClientRequestHeader.for_api_key(self._api_key)
        return header_model.model_dump(by_alias=True)

    @staticmethod
    def _encode_body(body: Any) -> str:
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", exclude_none=True)
        try:
            return json.dumps(to_jsonable_python(body), ensure_ascii=False)
        except PydanticSerializationError as e:
            raise ValidationError(f"Request body is not JSON serializable: {e}") from e

    @staticmethod
    def _parse(model: Type[M], data: Any) -> M:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise DeserializationError(
                f"Unexpected {model.__name__} payload from the API: {e}"
            ) from e

    @staticmethod
    def _as_dict(data: Union[BaseModel, Dict[str, Any]]) -> Dict[str, Any]:
        if isinstance(data, BaseModel):
            return data.model_dump(mode="json", exclude_none=True)
        if isinstance(data, Mapping):
            return dict(data)
        raise ValidationError(
            f"Request body must be a mapping or a pydantic model, got {type(data).__name__}"
        )

    async def _list(self, model: Type[M], resource: str, per_page: int,
                    resource_id: Optional[str] = None,
                    action: Optional[str] = None) -> ListResponse[M]:
        path = ResourcePath(
            resource=resource,
            resource_id=resource_id,
            action=action,
            query={"per_page": per_page},
        )
        return self._parse(ListResponse[model], await self.dispatch(path, "GET"))

    # =========================================================================
    # Balance
    # =========================================================================

    async def get_balance(self) -> Balance:
        """Retrieve the wallets balance of the account."""
        return self._parse(Balance, await self.dispatch("balance", "GET"))

    # =========================================================================
    # Customers
    # =========================================================================

    async def create_customer(self, customer_data: Union[CreateCustomerParams, Dict[str, Any]]) -> Customer:
        return self._parse(Customer, await self.dispatch("customers", "POST", self._as_dict(customer_data)))

    async def get_customer(self, customer_id: str) -> Customer:
        path = ResourcePath(resource="customers", resource_id=customer_id)
        return self._parse(Customer, await self.dispatch(path, "GET"))

    async def update_customer(
        self,
        customer_id: str,
        update_data: Union[UpdateCustomerParams, Dict[str, Any]],
    ) -> Customer:
        path = ResourcePath(resource="customers", resource_id=customer_id)
        return self._parse(Customer, await self.dispatch(path, "PATCH", self._as_dict(update_data)))

    async def delete_customer(self, customer_id: str) -> DeleteItemResponse:
        path = ResourcePath(resource="customers", resource_id=customer_id)
        return self._parse(DeleteItemResponse, await self.dispatch(path, "DELETE"))

    async def list_customers(self, per_page: int = DEFAULT_PER_PAGE) -> ListResponse[Customer]:
        """List one page of customers."""
        return await self._list(Customer, "customers", per_page)

    # =========================================================================
    # Products
    # =========================================================================

    async def create_product(self, product_data: Union[CreateProductParams, Dict[str, Any]]) -> Product:
        return self._parse(Product, await self.dispatch("products", "POST", self._as_dict(product_data)))

    async def update_product(
        self,
        product_id: str,
        update_data: Union[UpdateProductParams, Dict[str, Any]],
    ) -> Product:
        path = ResourcePath(resource="products", resource_id=product_id)
        return self._parse(Product, await self.dispatch(path, "POST", self._as_dict(update_data)))

    async def get_product(self, product_id: str) -> Product:
        path = ResourcePath(resource="products", resource_id=product_id)
        return self._parse(Product, await self.dispatch(path, "GET"))

    async def list_products(self, per_page: int = DEFAULT_PER_PAGE) -> ListResponse[Product]:
        return await self._list(Product, "products", per_page)

    async def delete_product(self, product_id: str) -> DeleteItemResponse:
        path = ResourcePath(resource="products", resource_id=product_id)
        return self._parse(DeleteItemResponse, await self.dispatch(path, "DELETE"))

    async def get_product_prices(self, product_id: str, per_page: int = DEFAULT_PER_PAGE) -> ListResponse[Price]:
        """List one page of the prices attached to a product."""
        return await self._list(Price, "products", per_page, resource_id=product_id, action="prices")

    # =========================================================================
    # Prices
    # =========================================================================

    async def create_price(self, price_data: Union[CreatePriceParams, Dict[str, Any]]) -> Price:
        return self._parse(Price, await self.dispatch("prices", "POST", self._as_dict(price_data)))

    async def update_price(
        self,
        price_id: str,
        update_data: Union[UpdatePriceParams, Dict[str, Any]],
    ) -> Price:
        path = ResourcePath(resource="prices", resource_id=price_id)
        return self._parse(Price, await self.dispatch(path, "POST", self._as_dict(update_data)))

    async def get_price(self, price_id: str) -> Price:
        path = ResourcePath(resource="prices", resource_id=price_id)
        return self._parse(Price, await self.dispatch(path, "GET"))

    async def list_prices(self, per_page: int = DEFAULT_PER_PAGE) -> ListResponse[Price]:
        return await self._list(Price, "prices", per_page)

    # =========================================================================
    # Checkouts
    # =========================================================================

    async def create_checkout(self, checkout_data: Union[CreateCheckoutParams, Dict[str, Any]]) -> Checkout:
        """
        Create a checkout session.

        The payload is checked locally before anything is sent.

        Args:
            checkout_data: Checkout payload as a model or dict

        Returns:
            The created checkout, including its hosted checkout_url

        Raises:
            ValidationError: If success_url is not http(s), or neither items
                nor amount + currency are given
        """
        payload = self._as_dict(checkout_data)
        self._check_checkout(payload)
        return self._parse(Checkout, await self.dispatch("checkouts", "POST", payload))

    @staticmethod
    def _check_checkout(payload: Dict[str, Any]) -> None:
        success_url = payload.get("success_url")
        if not isinstance(success_url, str) or not success_url.startswith("http"):
            raise ValidationError("Invalid success_url, it must begin with http or https.")
        if payload.get("items") is None and not (payload.get("amount") and payload.get("currency")):
            raise ValidationError(
                "The items field is required when amount and currency are not present."
            )

    async def get_checkout(self, checkout_id: str) -> Checkout:
        path = ResourcePath(resource="checkouts", resource_id=checkout_id)
        return self._parse(Checkout, await self.dispatch(path, "GET"))

    async def list_checkouts(self, per_page: int = DEFAULT_PER_PAGE) -> ListResponse[Checkout]:
        return await self._list(Checkout, "checkouts", per_page)

    async def get_checkout_items(self, checkout_id: str, per_page: int = DEFAULT_PER_PAGE) -> ListResponse[CheckoutItem]:
        return await self._list(CheckoutItem, "checkouts", per_page, resource_id=checkout_id, action="items")

    async def expire_checkout(self, checkout_id: str) -> Checkout:
        """Expire a pending checkout before its automatic expiration."""
        path = ResourcePath(resource="checkouts", resource_id=checkout_id, action="expire")
        return self._parse(Checkout, await self.dispatch(path, "POST"))

    # =========================================================================
    # Payment links
    # =========================================================================

    async def create_payment_link(
        self,
        payment_link_data: Union[CreatePaymentLinkParams, Dict[str, Any]],
    ) -> PaymentLink:
        return self._parse(
            PaymentLink,
            await self.dispatch("payment-links", "POST", self._as_dict(payment_link_data)),
        )

    async def update_payment_link(
        self,
        payment_link_id: str,
        update_data: Union[UpdatePaymentLinkParams, Dict[str, Any]],
    ) -> PaymentLink:
        path = ResourcePath(resource="payment-links", resource_id=payment_link_id)
        return self._parse(PaymentLink, await self.dispatch(path, "POST", self._as_dict(update_data)))

    async def get_payment_link(self, payment_link_id: str) -> PaymentLink:
        path = ResourcePath(resource="payment-links", resource_id=payment_link_id)
        return self._parse(PaymentLink, await self.dispatch(path, "GET"))

    async def list_payment_links(self, per_page: int = DEFAULT_PER_PAGE) -> ListResponse[PaymentLink]:
        return await self._list(PaymentLink, "payment-links", per_page)

    async def get_payment_link_items(
        self,
        payment_link_id: str,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> ListResponse[PaymentLinkItem]:
        return await self._list(
            PaymentLinkItem, "payment-links", per_page,
            resource_id=payment_link_id, action="items",
        )
