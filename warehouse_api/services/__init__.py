from .exceptions import (
    OrderConflictError,
    OrderValidationError,
    ServiceError,
    StorageError,
)
from .order_service import OrderService, calculate_totals
from .warehouse_service import WarehouseService

__all__ = [
    "OrderService",
    "WarehouseService",
    "calculate_totals",
    "ServiceError",
    "OrderValidationError",
    "OrderConflictError",
    "StorageError",
]
