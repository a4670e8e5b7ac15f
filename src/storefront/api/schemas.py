"""Pydantic request/response schemas for the Orders API.

The wire format is camelCase; attributes are snake_case and populated by name.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Request Schemas ---


class AddressRequest(_CamelModel):
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    pin: str = Field(..., min_length=1, max_length=20)
    state: str = Field(..., min_length=1, max_length=100)


class OrderLineRequest(_CamelModel):
    id: str = Field(..., min_length=1, max_length=64)
    quantity: int = Field(..., gt=0)


class PlaceOrderRequest(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "address": {
                        "street": "221B Baker Street",
                        "city": "London",
                        "pin": "NW16XE",
                        "state": "Greater London",
                    },
                    "itemsList": [{"id": "8f14e45f-ceea-4e7a-9f7e-2a1c3b5d6e70", "quantity": 2}],
                    "orderOwner": "Jane Doe",
                    "phoneNumber": "+441234567890",
                    "cardNumber": "4242424242424242",
                }
            ]
        },
    )

    address: AddressRequest
    items_list: list[OrderLineRequest] = Field(..., min_length=1)
    order_owner: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., pattern=r"^\+?[0-9]{10,15}$")
    card_number: str = Field(..., pattern=r"^[0-9]{12,19}$")


# --- Response Schemas ---


class OrderCreatedResponse(BaseModel):
    status: str = "success"
    data: str = "Order created successfully"


class AddressResponse(_CamelModel):
    street: str
    city: str
    pin: str
    state: str


class OrderItemResponse(_CamelModel):
    id: str
    product_id: str
    quantity: int
    unit_price: float
    total_price: float


class OrderSummaryResponse(_CamelModel):
    id: str
    created_at: datetime | None = None
    total_discount: float
    total_amount: float
    order_status: str


class OrderDetailResponse(OrderSummaryResponse):
    user_id: str
    order_owner: str
    phone_number: str
    card_number: str
    address: AddressResponse | None = None
    items: list[OrderItemResponse] = []


class OrderListResponse(BaseModel):
    status: str = "success"
    orders: list[OrderSummaryResponse]


class NoOrdersResponse(BaseModel):
    message: str = "No orders found"


class OrderResponse(BaseModel):
    status: str = "success"
    order: OrderDetailResponse
