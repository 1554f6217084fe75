from fastapi import APIRouter, Body, Depends
from typing import Optional

from ...schemas.order import OrderCreate, OrderCreatedResponse
from ...schemas.warehouse import ErrorResponse
from ...services.order_service import OrderService
from ..dependencies import get_order_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "/raw",
    response_model=OrderCreatedResponse,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_raw_order(
        payload: Optional[OrderCreate] = Body(None),
        order_service: OrderService = Depends(get_order_service)
):
    """
    Create a raw OLTP order (ORDERS + ORD_DTL).

    `seq` is optional on each line; the database trigger numbers lines
    that arrive without one. Totals are computed from the lines unless
    `total_amount` / `total_discount` are supplied.
    """
    order = await order_service.create_raw_order(payload or OrderCreate())
    return OrderCreatedResponse(
        ord_id=order.ord_id,
        total_amount=order.total_amount,
        total_discount=order.total_discount
    )
