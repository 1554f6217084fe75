from decimal import Decimal

import pytest

from warehouse_api.schemas.order import OrderCreate, OrderLineCreate
from warehouse_api.services.exceptions import OrderValidationError
from warehouse_api.services.order_service import OrderService, calculate_totals


def line(qty, unit_price, discount=None):
    return OrderLineCreate(prd_id=1, qty=qty, unit_price=unit_price, discount=discount, shp_stat_id=1)


def test_calculate_totals():
    amount, discount = calculate_totals([line("2", "99.90", "1.50"), line(1, 10)])
    assert amount == Decimal("209.80")
    assert discount == Decimal("1.50")


def test_calculate_totals_rounds_half_up():
    amount, _ = calculate_totals([line(3, "0.105")])
    assert amount == Decimal("0.32")

    _, discount = calculate_totals([line(1, 1, "0.125")])
    assert discount == Decimal("0.13")


def test_calculate_totals_treats_missing_values_as_zero():
    amount, discount = calculate_totals([OrderLineCreate(prd_id=1, shp_stat_id=1)])
    assert amount == Decimal("0.00")
    assert discount == Decimal("0.00")


def test_explicit_totals_are_not_reconciled():
    data = OrderCreate(
        ord_id=1, usr_id=1, pay_stat_id=1,
        total_amount="1", lines=[line(2, 50, 5)],
    )
    amount, discount = OrderService.resolve_totals(data)
    assert amount == Decimal("1")
    assert discount == Decimal("5.00")


def test_calculate_totals_out_of_range_names_the_line():
    with pytest.raises(OrderValidationError) as exc_info:
        calculate_totals([line(1, 1), line("1e20", "1e20")])

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "lines[1] amount is out of range"


def test_validate_accepts_complete_order():
    OrderService.validate(OrderCreate(ord_id=1, usr_id=1, pay_stat_id=1, lines=[line(1, 1)]))


@pytest.mark.parametrize("missing", ["prd_id", "qty", "unit_price", "shp_stat_id"])
def test_validate_names_missing_line_field(missing):
    fields = {"prd_id": 1, "qty": 1, "unit_price": 1, "shp_stat_id": 1}
    del fields[missing]
    data = OrderCreate(
        ord_id=1, usr_id=1, pay_stat_id=1,
        lines=[line(1, 1), OrderLineCreate(**fields)],
    )
    with pytest.raises(OrderValidationError) as exc_info:
        OrderService.validate(data)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message.startswith("lines[1]")
    assert f"missing: {missing}" in exc_info.value.message
