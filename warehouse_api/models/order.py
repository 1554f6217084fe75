from sqlalchemy import Column, DateTime, Integer, Numeric

from ..database import Base


class Order(Base):
    __tablename__ = "orders"

    ord_id = Column(Integer, primary_key=True, autoincrement=False)
    order_date = Column(DateTime, nullable=False)

    # Totals are either supplied by the caller or summed from the lines
    total_amount = Column(Numeric(12, 2), nullable=False)
    total_discount = Column(Numeric(12, 2), nullable=False, default=0)

    usr_id = Column(Integer, nullable=False, index=True)
    pay_stat_id = Column(Integer, nullable=False)
