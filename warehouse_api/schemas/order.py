from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from decimal import Decimal


class OrderLineCreate(BaseModel):
    # Required fields are checked by OrderService so the caller gets one
    # message naming the offending line
    prd_id: Optional[int] = None
    qty: Optional[Decimal] = None
    unit_price: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    comment_text: Optional[str] = None
    rating: Optional[int] = None
    shp_stat_id: Optional[int] = None
    seq: Optional[int] = None

    class Config:
        extra = "ignore"


class OrderCreate(BaseModel):
    ord_id: Optional[int] = None
    order_date: Optional[datetime] = None
    usr_id: Optional[int] = None
    pay_stat_id: Optional[int] = None
    total_amount: Optional[Decimal] = None
    total_discount: Optional[Decimal] = None
    lines: Optional[List[OrderLineCreate]] = None

    class Config:
        extra = "ignore"


class OrderCreatedResponse(BaseModel):
    ok: bool = True
    ord_id: int
    total_amount: float
    total_discount: float
