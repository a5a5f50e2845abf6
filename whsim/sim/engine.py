# whsim/sim/engine.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List

from whsim.sim.transfers import TransferOutcome, process_delivery, process_pickup
from whsim.storage.items import GoodsType
from whsim.utils.logger import get_logger

if TYPE_CHECKING:
    from whsim.warehouse.warehouse import Warehouse

logger = get_logger(__name__)


# --------------------------- Estados y resultados ---------------------------

@dataclass
class ShelfSnapshot:
    shelf_id: str
    goods_type: GoodsType
    capacity: int
    count: int
    item_names: List[str]

    @property
    def utilization(self) -> float:
        return (self.count / self.capacity) if self.capacity > 0 else 0.0


@dataclass
class DayResult:
    day: int
    outcomes: List[TransferOutcome]
    shelves: List[ShelfSnapshot]
    terminal_count: int

    @property
    def not_ok_count(self) -> int:
        """Eventos PARTIAL o FAILED del día."""
        return sum(1 for o in self.outcomes if not o.ok)

    @property
    def elapsed_cost(self) -> float:
        return sum(o.elapsed_cost for o in self.outcomes)


@dataclass
class SimResult:
    start_day: int
    final_day: int
    days: List[DayResult] = field(default_factory=list)

    @property
    def outcomes(self) -> List[TransferOutcome]:
        return [o for d in self.days for o in d.outcomes]

    def totals(self) -> Dict[str, float]:
        deliveries = [o for o in self.outcomes if o.kind == "DELIVERY"]
        pickups = [o for o in self.outcomes if o.kind == "PICKUP"]
        return {
            "days_simulated": len(self.days),
            "deliveries": len(deliveries),
            "pickups": len(pickups),
            "units_shelved": sum(o.transferred for o in deliveries),
            "units_picked": sum(o.transferred for o in pickups),
            "units_shipped": sum(o.shipped for o in pickups),
            "units_dropped": sum(o.dropped for o in self.outcomes),
            "partial_events": sum(1 for o in self.outcomes if not o.ok),
            "elapsed_cost": float(sum(o.elapsed_cost for o in self.outcomes)),
        }


Reporter = Callable[[DayResult], None]


# ------------------------------- Simulador ---------------------------------

class Simulator:
    """
    Bucle síncrono de un estado por día. Es dueño único del contador de días;
    el almacén solo lo lee.
    """

    def __init__(self, warehouse: "Warehouse"):
        self.warehouse = warehouse
        self._day: int = 0
        self._reporters: List[Reporter] = []

    @property
    def current_day(self) -> int:
        return self._day

    def add_reporter(self, reporter: Reporter) -> None:
        self._reporters.append(reporter)

    def snapshot(self) -> List[ShelfSnapshot]:
        snaps = []
        for shelf in self.warehouse.shelves:
            items = shelf.snapshot()
            snaps.append(ShelfSnapshot(
                shelf_id=shelf.shelf_id,
                goods_type=shelf.goods_type,
                capacity=shelf.capacity,
                count=len(items),
                item_names=[it.name for it in items],
            ))
        return snaps

    def step(self) -> DayResult:
        self._day += 1
        day = self._day
        wh = self.warehouse

        outcomes: List[TransferOutcome] = []
        # se materializa la lista antes de procesar (como un ToList)
        for ev in list(wh.delivery_schedule.due_on(day)):
            outcomes.append(process_delivery(ev, wh))
        for ev in list(wh.pickup_schedule.due_on(day)):
            outcomes.append(process_pickup(ev, wh))

        logger.info("Simulation Day: %d (%d events)", day, len(outcomes))
        result = DayResult(
            day=day,
            outcomes=outcomes,
            shelves=self.snapshot(),
            terminal_count=len(wh.terminal),
        )
        for rep in self._reporters:
            rep(result)
        return result

    def run(self, days: int) -> SimResult:
        if days < 0:
            raise ValueError(f"days debe ser >= 0 (recibido {days})")
        res = SimResult(start_day=self._day, final_day=self._day)
        for _ in range(days):
            res.days.append(self.step())
        res.final_day = self._day
        return res
