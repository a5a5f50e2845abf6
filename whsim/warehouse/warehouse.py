# whsim/warehouse/warehouse.py
from typing import Dict, List, Optional

from whsim.sim.engine import Reporter, ShelfSnapshot, SimResult, Simulator
from whsim.sim.events import Event, EventKind, EventSchedule
from whsim.config.warehouse_config import WarehouseConfig
from whsim.storage.items import GoodsType, Item, ItemHistory, ItemTemplate
from whsim.storage.pools import Shelf, Terminal
from whsim.utils.logger import get_logger

logger = get_logger(__name__)


class Warehouse:
    """
    Fachada del almacén: dueña de estantes, Terminal, agendas e historial.
    Cada instancia es independiente; no comparte pools con otras.
    """

    def __init__(self, config: Optional[WarehouseConfig] = None):
        self.config = config if config is not None else WarehouseConfig()
        self.config.validate()
        self.shelves: List[Shelf] = []
        self.terminal = Terminal(self.config.terminal_capacity)
        self.delivery_schedule = EventSchedule("DELIVERY", self.config.recurrence_horizon_days)
        self.pickup_schedule = EventSchedule("PICKUP", self.config.recurrence_horizon_days)
        self.item_history = ItemHistory()
        self.catalog: Dict[str, GoodsType] = {}
        self._simulator = Simulator(self)

    # --------- estado ---------
    @property
    def current_day(self) -> int:
        return self._simulator.current_day

    def add_reporter(self, reporter: Reporter) -> None:
        self._simulator.add_reporter(reporter)

    # --------- estantes / Terminal ---------
    def add_shelf(self, shelf_id: str, capacity: int, goods_type: GoodsType,
                  terminal_to_shelf_cost: float = 0.0, shelf_to_terminal_cost: float = 0.0) -> Shelf:
        shelf = Shelf(shelf_id, capacity, goods_type, terminal_to_shelf_cost, shelf_to_terminal_cost)
        if not self.config.supports(shelf.goods_type):
            logger.warning("Shelf '%s' stores %s but the warehouse is not configured for it.",
                           shelf.shelf_id, shelf.goods_type.value)
        self.shelves.append(shelf)
        logger.info("Shelf '%s' added to the warehouse.", shelf.shelf_id)
        return shelf

    def remove_shelf(self, shelf_id: str) -> Optional[Shelf]:
        # sin reubicar el contenido: los ítems se van con el estante
        for idx, shelf in enumerate(self.shelves):
            if shelf.shelf_id == shelf_id:
                del self.shelves[idx]
                logger.info("Shelf '%s' removed from the warehouse.", shelf_id)
                return shelf
        logger.warning("Shelf '%s' not found in the warehouse.", shelf_id)
        return None

    def get_shelf(self, shelf_id: str) -> Optional[Shelf]:
        return next((s for s in self.shelves if s.shelf_id == shelf_id), None)

    def configure_terminal(self, capacity: int) -> None:
        self.terminal.configure(capacity)

    def add_item(self, name: str, goods_type: GoodsType) -> None:
        self.catalog[name] = GoodsType.parse(goods_type)
        logger.info("Item '%s' added to the warehouse.", name)

    # --------- agendas ---------
    def _event(self, kind: EventKind, day: int, goods_type: GoodsType, quantity: int, item_name: str) -> Event:
        gt = GoodsType.parse(goods_type)
        return Event(kind=kind, day=int(day), goods_type=gt, quantity=int(quantity),
                     template=ItemTemplate(item_name, gt))

    def add_delivery(self, day: int, goods_type: GoodsType, quantity: int, item_name: str) -> None:
        self.delivery_schedule.add_once(self._event("DELIVERY", day, goods_type, quantity, item_name))
        logger.info("Delivery scheduled for '%s' on simulation day %d.", item_name, day)

    def add_weekly_delivery(self, interval_days: int, day: int, goods_type: GoodsType,
                            quantity: int, item_name: str) -> int:
        n = self.delivery_schedule.add_weekly(
            interval_days, self._event("DELIVERY", day, goods_type, quantity, item_name))
        logger.info("Weekly delivery scheduled for '%s' every %d days starting on simulation day %d (%d occurrences).",
                    item_name, interval_days, day, n)
        return n

    def add_pickup(self, day: int, goods_type: GoodsType, quantity: int, item_name: str) -> None:
        self.pickup_schedule.add_once(self._event("PICKUP", day, goods_type, quantity, item_name))
        logger.info("Pickup scheduled for '%s' on simulation day %d.", item_name, day)

    def add_weekly_pickup(self, interval_days: int, day: int, goods_type: GoodsType,
                          quantity: int, item_name: str) -> int:
        n = self.pickup_schedule.add_weekly(
            interval_days, self._event("PICKUP", day, goods_type, quantity, item_name))
        logger.info("Weekly pickup scheduled for '%s' every %d days starting on simulation day %d (%d occurrences).",
                    item_name, interval_days, day, n)
        return n

    # --------- ejecución / consulta ---------
    def run_simulation(self, days: int) -> SimResult:
        return self._simulator.run(days)

    def find_item(self, name: str) -> Optional[Item]:
        return self.item_history.find_by_name(name)

    def item_history_of(self, name: str) -> List[str]:
        return self.item_history.history_of(name)

    def shelf_snapshot(self, shelf_id: str) -> List[Item]:
        shelf = self.get_shelf(shelf_id)
        return shelf.snapshot() if shelf is not None else []

    def terminal_snapshot(self) -> List[Item]:
        return self.terminal.snapshot()

    def shelf_report(self) -> List[ShelfSnapshot]:
        return self._simulator.snapshot()
