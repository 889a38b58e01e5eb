from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel
from decimal import Decimal
from typing import Annotated, List, Dict, Any, Optional, Union

from app.models.coupon import DiscountType

Number = Union[int, float]
NonNegativeNumber = Union[Annotated[int, Field(ge=0)], Annotated[float, Field(ge=0, allow_inf_nan=False)]]

# same precision as the coupons.percent_off / amount_off columns
PercentOff = Annotated[Decimal, Field(ge=0, le=100, max_digits=5, decimal_places=2)]
AmountOff = Annotated[Decimal, Field(ge=0, max_digits=18, decimal_places=2)]


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire; either is accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Request schemas
class OrderItem(CamelModel):
    product_id: str
    price: NonNegativeNumber
    quantity: int = Field(..., ge=1)
    metadata: Optional[Dict[str, Any]] = None


class Order(CamelModel):
    id: str
    amount: NonNegativeNumber = Field(..., description="Pre-discount order total")
    items: List[OrderItem]
    metadata: Optional[Dict[str, Any]] = None

    @field_validator("items", mode="before")
    @classmethod
    def wrap_single_item(cls, value):
        # a lone item object is accepted as a one-element list
        if isinstance(value, dict):
            return [value]
        return value


class Customer(CamelModel):
    id: str
    metadata: Optional[Dict[str, Any]] = None


class VerifyCouponBody(CamelModel):
    """Server flow: the caller supplies the tracking id."""

    customer: Customer
    order: Order
    tracking_id: str


class ClientVerifyCouponBody(CamelModel):
    """Client flow: the tracking id is derived by the engine."""

    customer: Customer
    order: Order
    metadata: Optional[Dict[str, Any]] = None


# Response schemas
class VerifiedOrder(Order):
    total_amount: Number
    total_discount_amount: Number


class VerificationResult(CamelModel):
    code: str
    discount_type: DiscountType
    percent_off: Optional[Number] = None
    amount_off: Optional[Number] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    tracking_id: str
    valid: bool = True
    order: VerifiedOrder


class VerificationResponse(BaseModel):
    data: VerificationResult


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode")
    code: str
    message: str
    errors: Optional[List[Any]] = None


# Provisioning schemas (used by seeding, not exposed over HTTP)
class CouponCreate(CamelModel):
    code: str = Field(..., min_length=1)
    discount_type: DiscountType
    percent_off: Optional[PercentOff] = None
    amount_off: Optional[AmountOff] = None
    active: bool = True
    product: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_off_fields(self):
        if self.discount_type in (DiscountType.PERCENT, DiscountType.EFFECT_PERCENT) and self.percent_off is None:
            raise ValueError(f"percent_off is required for {self.discount_type.value} coupons")
        if self.discount_type in (DiscountType.AMOUNT, DiscountType.EFFECT_AMOUNT) and self.amount_off is None:
            raise ValueError(f"amount_off is required for {self.discount_type.value} coupons")
        return self
