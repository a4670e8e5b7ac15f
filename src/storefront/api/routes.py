"""FastAPI routes for order placement and order lookups.

Thin adapters: request body → coordinator/query call → response model.
Errors raised by the core are rendered by ``storefront.api.errors``.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from storefront.api.auth import Identity, authenticated_identity
from storefront.api.schemas import (
    NoOrdersResponse,
    OrderCreatedResponse,
    OrderDetailResponse,
    OrderListResponse,
    OrderResponse,
    OrderSummaryResponse,
    PlaceOrderRequest,
)
from storefront.order import queries
from storefront.order.placement import OrderCoordinator

order_router = APIRouter(prefix="/orders", tags=["orders"])


def get_coordinator(request: Request) -> OrderCoordinator:
    return request.app.state.coordinator


@order_router.post("", status_code=201, response_model=OrderCreatedResponse)
async def create_order(
    body: PlaceOrderRequest,
    identity: Identity = Depends(authenticated_identity),
    coordinator: OrderCoordinator = Depends(get_coordinator),
) -> OrderCreatedResponse:
    coordinator.place_order(
        user_id=identity.user_id,
        order_owner=body.order_owner,
        phone_number=body.phone_number,
        card_number=body.card_number,
        address=body.address.model_dump(),
        items=[{"product_id": line.id, "quantity": line.quantity} for line in body.items_list],
    )
    return OrderCreatedResponse()


@order_router.get("")
async def list_orders(identity: Identity = Depends(authenticated_identity)) -> JSONResponse:
    summaries = queries.list_orders(identity.user_id)
    if not summaries:
        return JSONResponse(status_code=200, content=NoOrdersResponse().model_dump())

    body = OrderListResponse(orders=[OrderSummaryResponse(**summary) for summary in summaries])
    return JSONResponse(status_code=200, content=body.model_dump(mode="json", by_alias=True))


@order_router.get("/{order_id}", response_model=OrderResponse, response_model_by_alias=True)
async def get_order(order_id: str, identity: Identity = Depends(authenticated_identity)) -> OrderResponse:
    detail = queries.get_order(order_id, viewer_id=identity.user_id, viewer_is_admin=identity.is_admin)
    return OrderResponse(order=OrderDetailResponse(**detail))
