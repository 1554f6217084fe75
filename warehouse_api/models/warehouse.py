"""Star-schema tables populated by the full-refresh procedure.

The API only reads from them; they are declared here so reporting queries can
be composed with SQLAlchemy instead of dialect-specific SQL strings.
"""
from sqlalchemy import Column, DateTime, Integer, Numeric, String

from ..database import Base


class FactOrder(Base):
    __tablename__ = "dw_fact_order"

    ord_id = Column(Integer, primary_key=True, autoincrement=False)
    order_date = Column(DateTime, nullable=False, index=True)
    usr_id = Column(Integer)
    pay_stat_id = Column(Integer)
    total_amount = Column(Numeric(12, 2))
    total_discount = Column(Numeric(12, 2))


class FactOrderLine(Base):
    __tablename__ = "dw_fact_order_line"

    ord_id = Column(Integer, primary_key=True, autoincrement=False)
    seq = Column(Integer, primary_key=True, autoincrement=False)
    order_date = Column(DateTime, nullable=False, index=True)
    usr_id = Column(Integer)
    shop_key = Column(Integer)
    prd_key = Column(Integer)
    shp_stat_id = Column(Integer)
    qty = Column(Numeric(12, 3))
    unit_price = Column(Numeric(12, 2))
    discount = Column(Numeric(12, 2))
    line_amount = Column(Numeric(12, 2))
    rating = Column(Integer)
    comment_text = Column(String(1000))


class DimShop(Base):
    __tablename__ = "dw_dim_shop"

    shop_key = Column(Integer, primary_key=True, autoincrement=False)
    shop_id = Column(Integer)
    shop_name = Column(String(255))
    rating_avg = Column(Numeric(4, 2))


class DimProduct(Base):
    __tablename__ = "dw_dim_product"

    prd_key = Column(Integer, primary_key=True, autoincrement=False)
    prd_id = Column(Integer)
    prd_name = Column(String(255))
    description = Column(String(2000))
    cat_id = Column(Integer)
    prd_type_id = Column(Integer)
    price = Column(Numeric(12, 2))
    discount = Column(Numeric(12, 2))


class DimCategory(Base):
    __tablename__ = "dw_dim_category"

    cat_id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255))


class DimProductType(Base):
    __tablename__ = "dw_dim_prd_type"

    prd_type_id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255))


class DimPayStat(Base):
    __tablename__ = "dw_dim_pay_stat"

    pay_stat_id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100))


class DimShipStat(Base):
    __tablename__ = "dw_dim_shp_stat"

    shp_stat_id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100))
