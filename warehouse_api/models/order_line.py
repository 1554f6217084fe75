from sqlalchemy import DDL, Column, ForeignKey, Integer, Numeric, String, event

from ..database import Base


class OrderLine(Base):
    __tablename__ = "ord_dtl"

    ord_id = Column(Integer, ForeignKey("orders.ord_id"), primary_key=True)
    # Filled by TRG_ORD_DTL_SEQ when inserted as NULL
    seq = Column(Integer, primary_key=True, autoincrement=False)

    qty = Column(Numeric(12, 3), nullable=False)
    unit_price = Column(Numeric(12, 2), nullable=False)
    discount = Column(Numeric(12, 2), nullable=False, default=0)

    comment_text = Column(String(1000), nullable=True)
    rating = Column(Integer, nullable=True)

    prd_id = Column(Integer, nullable=False, index=True)
    shp_stat_id = Column(Integer, nullable=False)


# SQLite counterpart of the Oracle TRG_ORD_DTL_SEQ trigger: a row inserted
# without SEQ is re-inserted with MAX(SEQ) + 1 for its order and the
# original row is dropped.
_sqlite_seq_trigger = DDL(
    """
    CREATE TRIGGER trg_ord_dtl_seq
    BEFORE INSERT ON ord_dtl
    FOR EACH ROW WHEN NEW.seq IS NULL
    BEGIN
        INSERT INTO ord_dtl
            (ord_id, seq, qty, unit_price, discount, comment_text, rating, prd_id, shp_stat_id)
        VALUES (
            NEW.ord_id,
            (SELECT COALESCE(MAX(seq), 0) + 1 FROM ord_dtl WHERE ord_id = NEW.ord_id),
            NEW.qty, NEW.unit_price, NEW.discount, NEW.comment_text,
            NEW.rating, NEW.prd_id, NEW.shp_stat_id
        );
        SELECT RAISE(IGNORE);
    END
    """
)

event.listen(
    OrderLine.__table__,
    "after_create",
    _sqlite_seq_trigger.execute_if(dialect="sqlite"),
)
