"""
Resource Models returned by the Chargily Pay API

One model per API object. Fields mirror what the API documents today;
anything else the API sends is kept on the model as an extra attribute.
"""

from typing import Any, Generic, List, Optional, TypeVar, Union

from pydantic import Field, field_validator

from .bases import PassThroughModel, ResourceModel


T = TypeVar("T")


# ============================================================================
# Balance
# ============================================================================

class Wallet(PassThroughModel):
    """Balance of a single currency wallet."""
    currency: Optional[str] = None
    balance: Optional[float] = None
    ready_for_payout: Optional[float] = None
    on_hold: Optional[float] = None


class Balance(PassThroughModel):
    """Account balance, one wallet per currency."""
    entity: Optional[str] = None
    livemode: Optional[bool] = None
    wallets: List[Wallet] = Field(default_factory=list)

    @field_validator("wallets", mode="before")
    @classmethod
    def _null_wallets(cls, value):
        return [] if value is None else value


# ============================================================================
# Customers
# ============================================================================

class Address(PassThroughModel):
    country: Optional[str] = None
    state: Optional[str] = None
    address: Optional[str] = None


class Customer(ResourceModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Union[Address, str]] = None
    metadata: Optional[Any] = None


# ============================================================================
# Products and prices
# ============================================================================

class Product(ResourceModel):
    name: Optional[str] = None
    description: Optional[str] = None
    images: Optional[List[str]] = None
    metadata: Optional[Any] = None


class Price(ResourceModel):
    amount: Optional[float] = None
    currency: Optional[str] = None
    product_id: Optional[str] = None
    metadata: Optional[Any] = None


# ============================================================================
# Checkouts
# ============================================================================

class Checkout(ResourceModel):
    """Checkout session.

    Attributes:
        status: One of pending, processing, paid, failed, canceled, expired
        checkout_url: Hosted page the customer is redirected to
    """
    amount: Optional[float] = None
    currency: Optional[str] = None
    fees: Optional[float] = None
    fees_on_merchant: Optional[float] = None
    fees_on_customer: Optional[float] = None
    pass_fees_to_customer: Optional[bool] = None
    chargily_pay_fees_allocation: Optional[str] = None
    status: Optional[str] = None
    locale: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Any] = None
    success_url: Optional[str] = None
    failure_url: Optional[str] = None
    webhook_endpoint: Optional[str] = None
    payment_method: Optional[str] = None
    invoice_id: Optional[str] = None
    customer_id: Optional[str] = None
    payment_link_id: Optional[str] = None
    shipping_address: Optional[str] = None
    collect_shipping_address: Optional[bool] = None
    discount: Optional[Any] = None
    amount_without_discount: Optional[float] = None
    checkout_url: Optional[str] = None


class CheckoutItem(PassThroughModel):
    """Line item of a checkout."""
    price_id: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    quantity: Optional[int] = None


# ============================================================================
# Payment links
# ============================================================================

class PaymentLink(ResourceModel):
    name: Optional[str] = None
    active: Optional[bool] = None
    after_completion_message: Optional[str] = None
    locale: Optional[str] = None
    pass_fees_to_customer: Optional[bool] = None
    collect_shipping_address: Optional[bool] = None
    metadata: Optional[Any] = None
    url: Optional[str] = None


class PaymentLinkItem(PassThroughModel):
    """Line item of a payment link."""
    price_id: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    quantity: Optional[int] = None
    adjustable_quantity: Optional[bool] = None


# ============================================================================
# Generic responses
# ============================================================================

class DeleteItemResponse(PassThroughModel):
    id: Optional[str] = None
    entity: Optional[str] = None
    livemode: Optional[bool] = None
    deleted: Optional[bool] = None


class ListResponse(PassThroughModel, Generic[T]):
    """One page of a list endpoint.

    The client returns exactly the page it was asked for; following
    ``next_page_url`` is left to the caller.

    Attributes:
        data: Objects on this page
        current_page: 1-based index of this page
        per_page: Page size the server applied
        total: Number of objects across all pages
    """

    livemode: Optional[bool] = None
    current_page: Optional[int] = None
    data: List[T] = Field(default_factory=list)
    first_page_url: Optional[str] = None
    last_page: Optional[int] = None
    last_page_url: Optional[str] = None
    next_page_url: Optional[str] = None
    path: Optional[str] = None
    per_page: Optional[int] = None
    prev_page_url: Optional[str] = None
    total: Optional[int] = None

    @field_validator("data", mode="before")
    @classmethod
    def _null_data(cls, value):
        return [] if value is None else value

    @property
    def has_more(self) -> bool:
        return self.next_page_url is not None
