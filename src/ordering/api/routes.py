"""FastAPI endpoints for the Ordering domain."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    ExpandedOrderResponse,
    OrderResponse,
    PlaceOrderRequest,
    UpdateOrderStatusRequest,
)
from ordering.order.expansion import expand_orders
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder
from ordering.order.status import UpdateOrderStatus
from shared.exceptions import AccessDeniedError
from shared.guard import require_admin, require_principal
from shared.tokens import Principal

order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, principal: Principal = Depends(require_principal)) -> OrderResponse:
    command = PlaceOrder(
        user_id=principal.user_id,
        items=json.dumps([item.model_dump() for item in body.items]),
        delivery_address=json.dumps(body.delivery_address.model_dump()),
        payment_method=body.payment_method,
        client_total=body.total_amount,
    )
    order_id = current_domain.process(command, asynchronous=False)
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse(**order.to_payload())


@order_router.get("", response_model=list[OrderResponse])
async def list_my_orders(principal: Principal = Depends(require_principal)) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).for_user(principal.user_id)
    return [OrderResponse(**o.to_payload()) for o in orders]


# Declared before /{order_id} so "all" is not captured as an id
@order_router.get("/all", response_model=list[ExpandedOrderResponse], dependencies=[Depends(require_admin)])
async def list_all_orders() -> list[ExpandedOrderResponse]:
    orders = current_domain.repository_for(Order).all_orders()
    return [ExpandedOrderResponse(**payload) for payload in expand_orders(orders)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, principal: Principal = Depends(require_principal)) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    if not principal.is_admin and not order.is_owned_by(principal.user_id):
        raise AccessDeniedError("Access denied")
    return OrderResponse(**order.to_payload())


@order_router.put("/{order_id}/status", response_model=OrderResponse, dependencies=[Depends(require_admin)])
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> OrderResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse(**order.to_payload())
