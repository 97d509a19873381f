"""
Request Parameter Models for create and update calls

Every client method that sends a body accepts either one of these models
or a plain dict. Models carry no business rules: the checkout
preconditions are enforced by the client so that they raise the SDK's own
ValidationError regardless of how the payload was built.
"""

from typing import Any, List, Optional

from pydantic import Field

from .bases import RequestParams
from .resources import Address


# ============================================================================
# Customers
# ============================================================================

class CreateCustomerParams(RequestParams):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    metadata: Optional[Any] = None


class UpdateCustomerParams(CreateCustomerParams):
    pass


# ============================================================================
# Products and prices
# ============================================================================

class CreateProductParams(RequestParams):
    name: str = Field(..., description="Product name shown on the checkout page")
    description: Optional[str] = None
    images: Optional[List[str]] = None
    metadata: Optional[Any] = None


class UpdateProductParams(RequestParams):
    name: Optional[str] = None
    description: Optional[str] = None
    images: Optional[List[str]] = None
    metadata: Optional[Any] = None


class CreatePriceParams(RequestParams):
    amount: int = Field(..., ge=0, description="Price amount in the given currency")
    currency: str = Field(..., description="ISO currency code, e.g. dzd")
    product_id: str = Field(..., description="Product the price belongs to")
    metadata: Optional[Any] = None


class UpdatePriceParams(RequestParams):
    metadata: Optional[Any] = None


# ============================================================================
# Checkouts
# ============================================================================

class CheckoutItemParams(RequestParams):
    price: str = Field(..., description="Price ID")
    quantity: int = Field(..., ge=1)


class CreateCheckoutParams(RequestParams):
    """Payload of a new checkout.

    Either ``items`` or both ``amount`` and ``currency`` must be given, and
    ``success_url`` must be an http(s) URL. Both rules are checked by
    ``ChargilyClient.create_checkout`` before the request is sent.
    """
    success_url: Optional[str] = None
    items: Optional[List[CheckoutItemParams]] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    payment_method: Optional[str] = None
    customer_id: Optional[str] = None
    failure_url: Optional[str] = None
    webhook_endpoint: Optional[str] = None
    description: Optional[str] = None
    locale: Optional[str] = None
    shipping_address: Optional[str] = None
    collect_shipping_address: Optional[bool] = None
    percentage_discount: Optional[int] = None
    amount_discount: Optional[int] = None
    pass_fees_to_customer: Optional[bool] = None
    chargily_pay_fees_allocation: Optional[str] = None
    metadata: Optional[Any] = None


# ============================================================================
# Payment links
# ============================================================================

class PaymentLinkItemParams(RequestParams):
    price: str = Field(..., description="Price ID")
    quantity: int = Field(..., ge=1)
    adjustable_quantity: Optional[bool] = None


class CreatePaymentLinkParams(RequestParams):
    name: str = Field(..., description="Internal name of the link")
    items: List[PaymentLinkItemParams] = Field(..., min_length=1)
    after_completion_message: Optional[str] = None
    locale: Optional[str] = None
    pass_fees_to_customer: Optional[bool] = None
    collect_shipping_address: Optional[bool] = None
    metadata: Optional[Any] = None


class UpdatePaymentLinkParams(RequestParams):
    name: Optional[str] = None
    items: Optional[List[PaymentLinkItemParams]] = None
    after_completion_message: Optional[str] = None
    locale: Optional[str] = None
    pass_fees_to_customer: Optional[bool] = None
    collect_shipping_address: Optional[bool] = None
    metadata: Optional[Any] = None
