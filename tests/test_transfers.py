import pytest
from whsim.sim.events import Event
from whsim.sim.transfers import process_delivery, process_pickup
from whsim.config.warehouse_config import WarehouseConfig
from whsim.storage.items import GoodsType, Item, ItemTemplate
from whsim.warehouse.warehouse import Warehouse

DRY = GoodsType.DRY_GOODS
COLD = GoodsType.REFRIGERATED

def make_wh(terminal_capacity=10):
    return Warehouse(WarehouseConfig(terminal_capacity=terminal_capacity))

def ev(kind, qty, name="Rice", gt=DRY, day=1):
    return Event(kind=kind, day=day, goods_type=gt, quantity=qty, template=ItemTemplate(name, gt))

def names(items):
    return [it.name for it in items]

def stock(shelf, n, name="Rice", gt=DRY):
    for i in range(1, n + 1):
        shelf.add(Item(f"{name}_{i}", gt))

# ------------------------------ Entregas ------------------------------

def test_zero_quantity_delivery_is_noop_success():
    wh = make_wh()
    shelf = wh.add_shelf("A1", 3, DRY)
    out = process_delivery(ev("DELIVERY", 0), wh)
    assert out.status == "SUCCESS"
    assert len(wh.terminal) == 0 and len(shelf) == 0
    assert len(wh.item_history) == 0

def test_partial_delivery_leaves_leftover_in_terminal():
    wh = make_wh(terminal_capacity=10)
    shelf = wh.add_shelf("A1", 3, DRY)
    out = process_delivery(ev("DELIVERY", 5), wh)
    assert out.status == "PARTIAL"
    assert (out.transferred, out.remaining) == (3, 2)
    assert names(shelf.snapshot()) == ["Rice_1", "Rice_2", "Rice_3"]
    assert names(wh.terminal.snapshot()) == ["Rice_4", "Rice_5"]

def test_delivery_fills_matching_shelves_in_list_order():
    wh = make_wh()
    a1 = wh.add_shelf("A1", 2, DRY, 1.5, 0)
    b1 = wh.add_shelf("B1", 10, COLD)
    a2 = wh.add_shelf("A2", 5, DRY, 1.0, 0)
    out = process_delivery(ev("DELIVERY", 4), wh)
    assert out.ok
    assert names(a1.snapshot()) == ["Rice_1", "Rice_2"]
    assert names(a2.snapshot()) == ["Rice_3", "Rice_4"]
    assert len(b1) == 0
    # costo simulado, sin esperas reales
    assert out.elapsed_cost == pytest.approx(2 * 1.5 + 2 * 1.0)

def test_delivery_history_entries():
    wh = make_wh()
    wh.add_shelf("A1", 1, DRY)
    process_delivery(ev("DELIVERY", 2), wh)
    assert wh.item_history_of("Rice_1") == [
        "Rice_1 added to Terminal",
        "Rice_1 moved from Terminal to Shelf: A1",
    ]
    assert wh.item_history_of("Rice_2") == ["Rice_2 added to Terminal"]

def test_delivery_into_full_terminal_drops_but_records_units():
    wh = make_wh(terminal_capacity=2)
    shelf = wh.add_shelf("A1", 10, DRY)
    spare = wh.add_shelf("A2", 10, DRY)
    out = process_delivery(ev("DELIVERY", 5), wh)
    # 3 unidades acuñadas y descartadas; la Terminal se vacía antes de terminar
    assert out.dropped == 3
    assert out.status == "PARTIAL"
    assert (out.transferred, out.remaining) == (2, 3)
    assert names(shelf.snapshot()) == ["Rice_1", "Rice_2"]
    # con la Terminal vacía no se sigue con los estantes siguientes
    assert len(spare) == 0
    assert len(wh.item_history) == 5
    assert wh.item_history_of("Rice_5") == ["Rice_5 added to Terminal"]

def test_delivery_without_terminal_space_fails():
    wh = make_wh(terminal_capacity=0)
    wh.add_shelf("A1", 10, DRY)
    out = process_delivery(ev("DELIVERY", 3), wh)
    assert out.status == "FAILED"
    assert out.transferred == 0 and out.dropped == 3

def test_delivery_without_matching_shelf_keeps_units_in_terminal():
    wh = make_wh()
    wh.add_shelf("B1", 10, COLD)
    out = process_delivery(ev("DELIVERY", 3), wh)
    assert out.status == "PARTIAL"
    assert len(wh.terminal) == 3
    assert out.transferred == 0

def test_delivery_onto_full_shelf_is_partial_not_failed():
    wh = make_wh(terminal_capacity=10)
    shelf = wh.add_shelf("A1", 1, DRY)
    stock(shelf, 1, name="Old")
    out = process_delivery(ev("DELIVERY", 3), wh)
    assert out.status == "PARTIAL"
    assert (out.transferred, out.remaining) == (0, 3)
    assert names(wh.terminal.snapshot()) == ["Rice_1", "Rice_2", "Rice_3"]
    assert names(shelf.snapshot()) == ["Old_1"]

def test_delivery_moves_oldest_terminal_item_first():
    """La Terminal es compartida: se traslada el primero, aunque sea de otro evento."""
    wh = make_wh()
    milk = Item("Milk_1", COLD)
    wh.terminal.add(milk)
    shelf = wh.add_shelf("A1", 5, DRY)
    out = process_delivery(ev("DELIVERY", 1), wh)
    assert out.ok
    assert shelf.snapshot() == [milk]
    assert names(wh.terminal.snapshot()) == ["Rice_1"]

# ------------------------------ Retiros ------------------------------

def test_pickup_shortfall_moves_what_exists():
    wh = make_wh()
    shelf = wh.add_shelf("A1", 10, DRY, 0, 2)
    stock(shelf, 2)
    out = process_pickup(ev("PICKUP", 5), wh)
    assert out.status == "PARTIAL"
    assert (out.transferred, out.remaining, out.shipped) == (2, 3, 2)
    assert len(shelf) == 0
    assert len(wh.terminal) == 0
    assert out.elapsed_cost == pytest.approx(4.0)

def test_pickup_from_empty_shelves_fails():
    wh = make_wh()
    wh.add_shelf("A1", 10, DRY)
    out = process_pickup(ev("PICKUP", 3), wh)
    assert out.status == "FAILED"
    assert out.transferred == 0

def test_pickup_drains_shelves_in_order_and_stops():
    wh = make_wh()
    a1 = wh.add_shelf("A1", 10, DRY)
    a2 = wh.add_shelf("A2", 10, DRY)
    stock(a1, 2, name="Rice")
    stock(a2, 3, name="Beans")
    out = process_pickup(ev("PICKUP", 3), wh)
    assert out.ok
    assert len(a1) == 0
    assert names(a2.snapshot()) == ["Beans_2", "Beans_3"]

def test_pickup_history_entries():
    wh = make_wh()
    shelf = wh.add_shelf("A1", 10, DRY)
    rice = Item("Rice_1", DRY)
    shelf.add(rice)
    process_pickup(ev("PICKUP", 1), wh)
    assert rice.location_history == [
        "Rice_1 moved to Terminal from Shelf: A1",
        "Rice_1 has been sent out of the warehouse",
    ]

def test_pickup_ships_front_of_whole_terminal():
    """El despacho toma el frente de la Terminal sin filtrar por tipo."""
    wh = make_wh()
    milk = Item("Milk_1", COLD)
    wh.terminal.add(milk)
    shelf = wh.add_shelf("A1", 10, DRY)
    stock(shelf, 2)
    out = process_pickup(ev("PICKUP", 2), wh)
    assert out.ok and out.shipped == 2
    assert milk.location_history == ["Milk_1 has been sent out of the warehouse"]
    assert names(wh.terminal.snapshot()) == ["Rice_2"]

def test_pickup_terminal_overflow_counts_drops_without_rollback():
    wh = make_wh(terminal_capacity=1)
    shelf = wh.add_shelf("A1", 10, DRY)
    stock(shelf, 3)
    out = process_pickup(ev("PICKUP", 3), wh)
    assert out.status == "SUCCESS"
    assert out.dropped == 2
    assert out.shipped == 1
    assert len(shelf) == 0 and len(wh.terminal) == 0
