from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from ...schemas.warehouse import ErrorResponse, SalesDailyRow
from ...services.warehouse_service import WarehouseService
from ...utils import to_number
from ..dependencies import get_warehouse_service

router = APIRouter(prefix="/pbi", tags=["power-bi"])


@router.get("/order_line_flat", responses={500: {"model": ErrorResponse}})
async def order_line_flat(
        days: Optional[str] = Query(None, description="Look-back window in days (default 90)"),
        limit: Optional[str] = Query(None, description="Maximum number of rows (default 50000)"),
        warehouse_service: WarehouseService = Depends(get_warehouse_service)
):
    """Flat order-line table for Power BI"""
    return await warehouse_service.order_line_flat(
        days=to_number(days, 90),
        limit=int(to_number(limit, 50000))
    )


@router.get(
    "/sales_daily",
    response_model=List[SalesDailyRow],
    responses={500: {"model": ErrorResponse}},
)
async def sales_daily(
        days: Optional[str] = Query(None, description="Look-back window in days (default 180)"),
        warehouse_service: WarehouseService = Depends(get_warehouse_service)
):
    """Daily sales from DW_FACT_ORDER"""
    return await warehouse_service.sales_daily(days=to_number(days, 180))
