import logging
import pytest
from whsim.storage.items import GoodsType, Item
from whsim.storage.pools import Shelf, Terminal

def make_items(n, name="Rice", gt=GoodsType.DRY_GOODS):
    return [Item(f"{name}_{i}", gt) for i in range(1, n + 1)]

def test_add_respects_capacity_and_drops_excess():
    term = Terminal(3)
    results = [term.add(it) for it in make_items(5)]
    assert results == [True, True, True, False, False]
    assert len(term) == 3
    assert term.is_full()
    assert term.free_space == 0
    assert [it.name for it in term.snapshot()] == ["Rice_1", "Rice_2", "Rice_3"]

def test_drop_is_reported_as_warning(caplog):
    shelf = Shelf("A1", 1, GoodsType.DRY_GOODS)
    shelf.add(Item("Rice_1", GoodsType.DRY_GOODS))
    with caplog.at_level(logging.WARNING):
        assert not shelf.add(Item("Rice_2", GoodsType.DRY_GOODS))
    assert "Shelf 'A1' is at full capacity" in caplog.text

def test_count_stays_within_bounds_under_mixed_operations():
    term = Terminal(4)
    items = make_items(10)
    for i, it in enumerate(items):
        term.add(it)
        if i % 3 == 0:
            term.remove(items[i // 2])
        assert 0 <= len(term) <= term.capacity

def test_remove_preserves_order_and_uses_identity():
    term = Terminal(5)
    a, b, c = make_items(3)
    twin = Item("Rice_2", GoodsType.DRY_GOODS)  # mismo nombre, otro ítem
    for it in (a, b, c):
        term.add(it)
    assert not term.remove(twin)
    assert term.remove(b)
    assert term.snapshot() == [a, c]

def test_remove_absent_is_noop(caplog):
    term = Terminal(2)
    it = make_items(1)[0]
    term.add(it)
    with caplog.at_level(logging.WARNING):
        assert not term.remove(Item("Ghost", GoodsType.HAZARDOUS))
    assert len(term) == 1
    assert "not found" in caplog.text

def test_snapshot_does_not_mutate_pool():
    term = Terminal(2)
    for it in make_items(2):
        term.add(it)
    snap = term.snapshot()
    snap.clear()
    assert len(term) == 2

def test_shelf_exposes_type_and_costs():
    shelf = Shelf("B1", 10, "Refrigerated", 2, 3)
    assert shelf.goods_type is GoodsType.REFRIGERATED
    assert shelf.terminal_to_shelf_cost == 2.0
    assert shelf.shelf_to_terminal_cost == 3.0
    assert shelf.accepts(GoodsType.REFRIGERATED)
    assert not shelf.accepts(GoodsType.DRY_GOODS)

def test_invalid_pool_parameters():
    with pytest.raises(ValueError):
        Terminal(-1)
    with pytest.raises(ValueError):
        Shelf("X", 5, GoodsType.DRY_GOODS, -1, 0)
    with pytest.raises(ValueError):
        Shelf("X", 5, "Frozen")

def test_terminal_configure_changes_capacity():
    term = Terminal(1)
    term.configure(3)
    assert term.capacity == 3
    assert all(term.add(it) for it in make_items(3))
