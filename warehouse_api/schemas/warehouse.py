from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class HealthResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str


class DbTestResponse(BaseModel):
    ok: bool = True
    rows: List[Dict[str, Any]]


class EtlRunResponse(BaseModel):
    ok: bool = True
    message: str


class SalesDailyRow(BaseModel):
    order_day: Optional[str] = None
    gross_amount: Optional[float] = None
    total_discount: Optional[float] = None
    net_amount: Optional[float] = None
    order_count: int
