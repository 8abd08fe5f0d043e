"""Copy workflow integration tests."""

import sys
from dataclasses import dataclass, field

sys.path.insert(0, "src")

from pydantic import BaseModel

from structcopy import clone, shallow_copy, structural_copy, universal_copy


@dataclass
class LineItem:
    sku: str = ""
    quantity: int = 0


@dataclass
class Order:
    number: str = ""
    total: int = 0
    items: list[LineItem] = field(default_factory=list)
    parent: "Order | None" = None


class LineItemView(BaseModel):
    sku: str = ""
    quantity: int = 0


class OrderView(BaseModel):
    number: str = ""
    total: float = 0.0
    items: tuple[LineItemView, ...] = ()


def _order() -> Order:
    return Order(number="A-1", total=12, items=[LineItem("bolt", 3), LineItem("nut", 9)])


def test_three_strategies_on_one_source():
    """Shallow shares, structural rebuilds strictly, universal coerces."""
    order = _order()

    shallow = shallow_copy(order, Order)
    structural = structural_copy(order, OrderView)
    universal = universal_copy(order, OrderView)

    assert shallow.items is order.items

    assert structural.number == "A-1"
    assert structural.total == 0.0  # int -> float is never coerced structurally
    assert structural.items == (
        LineItemView(sku="bolt", quantity=3),
        LineItemView(sku="nut", quantity=9),
    )

    assert universal.total == 12.0
    assert universal.items == structural.items


def test_structural_then_universal_round_trip():
    """A view projected structurally can be cloned through the fallback path."""
    view = structural_copy(_order(), OrderView)

    copied = clone(view)

    assert copied == view
    assert copied is not view


def test_self_referencing_order_needs_fallback():
    """Cycles are handled by universal_copy by dropping the back-reference."""
    order = _order()
    order.parent = order

    copied = universal_copy(order, Order)

    assert copied.number == "A-1"
    assert copied.parent is None
    assert copied.items == order.items
