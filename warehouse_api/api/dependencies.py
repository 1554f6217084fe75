from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings
from ..database import get_db
from ..services.order_service import OrderService
from ..services.warehouse_service import WarehouseService


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the app was built with"""
    return request.app.state.settings


async def get_order_service(
    db: AsyncSession = Depends(get_db)
) -> OrderService:
    """Dependency for OrderService"""
    return OrderService(db)


async def get_warehouse_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
) -> WarehouseService:
    """Dependency for WarehouseService"""
    return WarehouseService(db, settings)
