"""
Input contracts for IPN (instant payment notification) orders.
"""

from typing import Annotated, List

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, Field

from .base import Contract, PositiveId


def check_email(value: str) -> str:
    """Reject malformed addresses but pass the caller's spelling through unchanged."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}")
    return value


BuyerEmail = Annotated[str, AfterValidator(check_email), Field(json_schema_extra={"format": "email"})]


class AddressInput(Contract):
    street_and_number: str = Field(default=None, description="Street and house number")
    city: str = Field(default=None, description="City")
    postal_code: str = Field(default=None, description="Postal code")
    country: str = Field(default=None, description="Country")


class MarketplaceBuyerInput(Contract):
    email: BuyerEmail = Field(..., description="Buyer's email address")
    first_name: str = Field(default=None, description="Buyer's first name")
    last_name: str = Field(default=None, description="Buyer's last name")
    phone_number: str = Field(default=None, description="Buyer's phone number")
    address: AddressInput = Field(default=None, description="Buyer's address")


class TransactionInput(Contract):
    amount: float = Field(..., strict=True, gt=0, description="Transaction amount (decimal, e.g., 10.00)")
    id: str = Field(default=None, description="External transaction ID (will be prefixed with portal ID)")


class IpnOrderPaymentInput(Contract):
    """An external payment that unlocks courses for a buyer."""

    marketplace_buyer: MarketplaceBuyerInput = Field(..., description="Buyer information")
    course_ids: List[PositiveId] = Field(..., min_length=1, description="List of course IDs to unlock")
    id: str = Field(default=None, description="External order ID (will be prefixed with portal ID)")
    transaction: TransactionInput = Field(default=None, description="Transaction information")
