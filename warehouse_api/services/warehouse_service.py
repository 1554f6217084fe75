from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Union
import logging

from sqlalchemy import Date, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement

from ..config import Settings
from ..models.warehouse import (
    DimCategory,
    DimPayStat,
    DimProduct,
    DimProductType,
    DimShipStat,
    DimShop,
    FactOrder,
    FactOrderLine,
)
from ..utils import to_iso_day, to_iso_timestamp
from .exceptions import StorageError

logger = logging.getLogger(__name__)


class trunc_day(FunctionElement):
    """Date part of a DATE/TIMESTAMP column"""

    type = Date()
    name = "trunc_day"
    inherit_cache = True


@compiles(trunc_day)
def _trunc_day_default(element, compiler, **kw):
    return "DATE(%s)" % compiler.process(element.clauses, **kw)


@compiles(trunc_day, "oracle")
def _trunc_day_oracle(element, compiler, **kw):
    return "TRUNC(%s)" % compiler.process(element.clauses, **kw)


def window_start(days: Union[int, float]) -> datetime:
    """Midnight today minus `days`, i.e. TRUNC(SYSDATE) - :days"""
    return datetime.combine(date.today(), time.min) - timedelta(days=days)


class WarehouseService:
    """Full refresh trigger and Power BI reporting reads"""

    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.settings = settings

    async def run_full_refresh(self) -> None:
        """Run the refresh procedure; it commits or rolls back on its own."""
        procedure = self.settings.etl_procedure
        logger.info(f"🔄 Running {procedure}")
        try:
            await self.db.execute(text(f"BEGIN {procedure}; END;"))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"❌ {procedure} failed: {e}")
            raise StorageError.from_exc(e) from e
        logger.info(f"✅ {procedure} completed")

    async def probe(self) -> List[Dict[str, Any]]:
        try:
            result = await self.db.execute(text(self.settings.db_probe_sql))
            return [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            logger.error(f"❌ Database probe failed: {e}")
            raise StorageError.from_exc(e) from e

    async def order_line_flat(self, days: Union[int, float], limit: int) -> List[Dict[str, Any]]:
        """Order lines joined with every dimension, newest first"""
        line = FactOrderLine
        order = FactOrder
        shop = DimShop
        product = DimProduct
        category = DimCategory
        prd_type = DimProductType
        pay_stat = DimPayStat
        shp_stat = DimShipStat

        gross = func.coalesce(line.qty, 0) * func.coalesce(line.unit_price, 0)
        line_discount = func.coalesce(line.discount, 0)

        query = (
            select(
                line.ord_id,
                line.seq,
                line.order_date,
                trunc_day(line.order_date).label("order_day"),
                line.usr_id,
                line.shp_stat_id,
                shp_stat.name.label("shp_stat_name"),
                line.qty,
                line.unit_price,
                gross.label("gross_line_amount"),
                line_discount.label("line_discount"),
                (gross - line_discount).label("net_line_amount"),
                line.line_amount,
                line.rating,
                line.comment_text,
                shop.shop_key,
                shop.shop_id,
                shop.shop_name,
                shop.rating_avg,
                product.prd_key,
                product.prd_id,
                product.prd_name,
                product.description,
                product.cat_id,
                category.name.label("cat_name"),
                product.prd_type_id,
                prd_type.name.label("prd_type_name"),
                product.price.label("list_price"),
                product.discount.label("prd_discount"),
                order.pay_stat_id,
                pay_stat.name.label("pay_stat_name"),
                order.total_amount,
                order.total_discount,
            )
            .select_from(line)
            .join(order, order.ord_id == line.ord_id)
            .outerjoin(shop, shop.shop_key == line.shop_key)
            .outerjoin(product, product.prd_key == line.prd_key)
            .outerjoin(category, category.cat_id == product.cat_id)
            .outerjoin(prd_type, prd_type.prd_type_id == product.prd_type_id)
            .outerjoin(pay_stat, pay_stat.pay_stat_id == order.pay_stat_id)
            .outerjoin(shp_stat, shp_stat.shp_stat_id == line.shp_stat_id)
            .where(line.order_date >= window_start(days))
            .order_by(line.order_date.desc(), line.ord_id.desc(), line.seq)
            .limit(max(limit, 0))
        )

        try:
            result = await self.db.execute(query)
            rows = [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            logger.error(f"❌ Error reading order_line_flat: {e}")
            raise StorageError.from_exc(e) from e

        for row in rows:
            row["order_date"] = to_iso_timestamp(row["order_date"])
            row["order_day"] = to_iso_day(row["order_day"])
        return rows

    async def sales_daily(self, days: Union[int, float]) -> List[Dict[str, Any]]:
        """Gross, discount, net and order count per day from DW_FACT_ORDER"""
        order = FactOrder
        day = trunc_day(order.order_date)

        query = (
            select(
                day.label("order_day"),
                func.sum(order.total_amount).label("gross_amount"),
                func.sum(order.total_discount).label("total_discount"),
                func.sum(order.total_amount - order.total_discount).label("net_amount"),
                func.count().label("order_count"),
            )
            .where(order.order_date >= window_start(days))
            .group_by(day)
            .order_by(day)
        )

        try:
            result = await self.db.execute(query)
            rows = [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            logger.error(f"❌ Error reading sales_daily: {e}")
            raise StorageError.from_exc(e) from e

        for row in rows:
            row["order_day"] = to_iso_day(row["order_day"])
        return rows
