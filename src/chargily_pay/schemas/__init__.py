from .bases import ChargilyModel, ResourceModel, RequestParams
from .https import ClientRequestHeader, HttpMethod, ResourcePath, RequestDescriptor
from .modes import ApiMode
from .resources import (
    Wallet,
    Balance,
    Address,
    Customer,
    Product,
    Price,
    Checkout,
    CheckoutItem,
    PaymentLink,
    PaymentLinkItem,
    DeleteItemResponse,
    ListResponse,
)
from .params import (
    CreateCustomerParams,
    UpdateCustomerParams,
    CreateProductParams,
    UpdateProductParams,
    CreatePriceParams,
    UpdatePriceParams,
    CheckoutItemParams,
    CreateCheckoutParams,
    PaymentLinkItemParams,
    CreatePaymentLinkParams,
    UpdatePaymentLinkParams,
)

__all__ = [
    "ChargilyModel",
    "ResourceModel",
    "RequestParams",
    "ClientRequestHeader",
    "HttpMethod",
    "ResourcePath",
    "RequestDescriptor",
    "ApiMode",
    "Wallet",
    "Balance",
    "Address",
    "Customer",
    "Product",
    "Price",
    "Checkout",
    "CheckoutItem",
    "PaymentLink",
    "PaymentLinkItem",
    "DeleteItemResponse",
    "ListResponse",
    "CreateCustomerParams",
    "UpdateCustomerParams",
    "CreateProductParams",
    "UpdateProductParams",
    "CreatePriceParams",
    "UpdatePriceParams",
    "CheckoutItemParams",
    "CreateCheckoutParams",
    "PaymentLinkItemParams",
    "CreatePaymentLinkParams",
    "UpdatePaymentLinkParams",
]
