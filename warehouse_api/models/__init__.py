from .order import Order
from .order_line import OrderLine
from .warehouse import (
    DimCategory,
    DimPayStat,
    DimProduct,
    DimProductType,
    DimShipStat,
    DimShop,
    FactOrder,
    FactOrderLine,
)

__all__ = [
    "Order",
    "OrderLine",
    "FactOrder",
    "FactOrderLine",
    "DimShop",
    "DimProduct",
    "DimCategory",
    "DimProductType",
    "DimPayStat",
    "DimShipStat",
]
