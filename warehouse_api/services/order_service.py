from datetime import datetime
from decimal import Decimal, DecimalException, ROUND_HALF_UP
from typing import List, Optional, Tuple
import logging

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.order import Order
from ..models.order_line import OrderLine
from ..schemas.order import OrderCreate, OrderLineCreate
from .exceptions import OrderConflictError, OrderValidationError, StorageError

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
REQUIRED_LINE_FIELDS = ("prd_id", "qty", "unit_price", "shp_stat_id")


def calculate_totals(lines: List[OrderLineCreate]) -> Tuple[Decimal, Decimal]:
    """Sum qty * unit_price and the line discounts, rounding half-up once on each sum."""
    total_amount = Decimal(0)
    total_discount = Decimal(0)
    rounded = (Decimal("0.00"), Decimal("0.00"))
    for i, line in enumerate(lines):
        try:
            total_amount += (line.qty or 0) * (line.unit_price or 0)
            total_discount += line.discount or 0
            # Fails once a sum has more digits than the context holds at two places
            rounded = (
                total_amount.quantize(CENTS, rounding=ROUND_HALF_UP),
                total_discount.quantize(CENTS, rounding=ROUND_HALF_UP),
            )
        except DecimalException:
            raise OrderValidationError(f"lines[{i}] amount is out of range") from None
    return rounded


def resolve_order_date(order_date: Optional[datetime]) -> datetime:
    # ORDER_DATE has no time zone; store aware input in server-local time
    if order_date is None:
        return datetime.now()
    if order_date.tzinfo is not None:
        return order_date.astimezone().replace(tzinfo=None)
    return order_date


class OrderService:
    """Creates raw OLTP orders (ORDERS + ORD_DTL)"""

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def validate(data: OrderCreate) -> None:
        """Reject the request before any database access"""
        missing = [
            name for name in ("ord_id", "usr_id", "pay_stat_id")
            if getattr(data, name) is None
        ]
        if not data.lines:
            missing.append("lines[]")
        if missing:
            verb = "is" if len(missing) == 1 else "are"
            raise OrderValidationError(f"{', '.join(missing)} {verb} required")

        for i, line in enumerate(data.lines):
            missing = [name for name in REQUIRED_LINE_FIELDS if getattr(line, name) is None]
            if missing:
                raise OrderValidationError(
                    f"lines[{i}] must have {', '.join(REQUIRED_LINE_FIELDS)} "
                    f"(missing: {', '.join(missing)})"
                )

    @staticmethod
    def resolve_totals(data: OrderCreate) -> Tuple[Decimal, Decimal]:
        """Explicit totals win over computed ones, without reconciliation"""
        computed_amount, computed_discount = calculate_totals(data.lines)
        total_amount = data.total_amount if data.total_amount is not None else computed_amount
        total_discount = data.total_discount if data.total_discount is not None else computed_discount
        return total_amount, total_discount

    async def create_raw_order(self, data: OrderCreate) -> Order:
        """
        Insert the order header and all of its lines in one transaction.

        Raises OrderValidationError, OrderConflictError when ORD_ID is taken
        (found by the pre-check or by the primary key on insert) and
        StorageError for any other database failure.
        """
        self.validate(data)
        total_amount, total_discount = self.resolve_totals(data)
        ord_id = data.ord_id

        try:
            if await self._order_exists(ord_id):
                raise OrderConflictError(ord_id)

            order = Order(
                ord_id=ord_id,
                order_date=resolve_order_date(data.order_date),
                total_amount=total_amount,
                total_discount=total_discount,
                usr_id=data.usr_id,
                pay_stat_id=data.pay_stat_id
            )
            self.db.add(order)

            try:
                await self.db.flush()
            except IntegrityError:
                # A concurrent writer may have committed the same key after the pre-check
                await self.db.rollback()
                if await self._order_exists(ord_id):
                    raise OrderConflictError(ord_id)
                raise

            # SEQ stays NULL when not supplied; TRG_ORD_DTL_SEQ assigns it
            await self.db.execute(
                insert(OrderLine.__table__),
                self._line_rows(ord_id, data.lines)
            )

            await self.db.commit()

        except OrderConflictError:
            await self.db.rollback()
            logger.warning(f"⚠️ Order {ord_id} already exists")
            raise
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"❌ Error creating order {ord_id}: {e}")
            raise StorageError.from_exc(e) from e

        logger.info(f"✅ Order {ord_id} created with {len(data.lines)} lines")
        return order

    async def _order_exists(self, ord_id: int) -> bool:
        result = await self.db.execute(select(Order.ord_id).where(Order.ord_id == ord_id))
        return result.first() is not None

    @staticmethod
    def _line_rows(ord_id: int, lines: List[OrderLineCreate]) -> List[dict]:
        return [
            {
                "ord_id": ord_id,
                "seq": line.seq,
                "qty": line.qty,
                "unit_price": line.unit_price,
                "discount": line.discount if line.discount is not None else Decimal(0),
                "comment_text": line.comment_text,
                "rating": line.rating,
                "prd_id": line.prd_id,
                "shp_stat_id": line.shp_stat_id,
            }
            for line in lines
        ]
