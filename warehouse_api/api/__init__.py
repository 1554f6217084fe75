from fastapi import APIRouter
from .routes import orders_router, etl_router, pbi_router

# Main API router
api_router = APIRouter()

api_router.include_router(orders_router)
api_router.include_router(etl_router)
api_router.include_router(pbi_router)

__all__ = ["api_router"]
