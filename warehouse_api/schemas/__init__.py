from .order import OrderCreate, OrderLineCreate, OrderCreatedResponse
from .warehouse import (
    DbTestResponse,
    ErrorResponse,
    EtlRunResponse,
    HealthResponse,
    SalesDailyRow,
)

__all__ = [
    "OrderCreate",
    "OrderLineCreate",
    "OrderCreatedResponse",
    "HealthResponse",
    "ErrorResponse",
    "DbTestResponse",
    "EtlRunResponse",
    "SalesDailyRow",
]
