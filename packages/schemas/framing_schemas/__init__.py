"""Framing Schemas - Pydantic models for data contracts."""

from framing_schemas.business import BUSINESS, SHIPPING, BusinessInfo, ShippingPolicy
from framing_schemas.cart import CartItem
from framing_schemas.forms import (
    BusinessInquirySubmission,
    ContactFormSubmission,
    QuoteFormFields,
)
from framing_schemas.options import (
    ZIP_REQUIRED_SERVICES,
    FormOptions,
    Option,
    get_form_options,
)

__all__ = [
    # Business
    "BUSINESS",
    "SHIPPING",
    "BusinessInfo",
    "ShippingPolicy",
    # Cart
    "CartItem",
    # Forms
    "BusinessInquirySubmission",
    "ContactFormSubmission",
    "QuoteFormFields",
    # Options
    "ZIP_REQUIRED_SERVICES",
    "FormOptions",
    "Option",
    "get_form_options",
]
