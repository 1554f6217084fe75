from .orders import router as orders_router
from .etl import router as etl_router
from .pbi import router as pbi_router

__all__ = ["orders_router", "etl_router", "pbi_router"]
