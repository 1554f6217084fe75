from fastapi import APIRouter, Depends

from ...schemas.warehouse import ErrorResponse, EtlRunResponse
from ...services.warehouse_service import WarehouseService
from ..dependencies import get_warehouse_service

router = APIRouter(prefix="/etl", tags=["etl"])


@router.post("/run", response_model=EtlRunResponse, responses={500: {"model": ErrorResponse}})
async def run_etl(
        warehouse_service: WarehouseService = Depends(get_warehouse_service)
):
    """Run the full-refresh procedure that rebuilds the DW tables"""
    await warehouse_service.run_full_refresh()
    return EtlRunResponse(message="ETL completed")
