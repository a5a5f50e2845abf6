from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List

import numpy as np
import pandas as pd

from whsim.sim.engine import DayResult, ShelfSnapshot


@dataclass
class RowOccupancy:
    day: int
    shelf_id: str
    goods_type: str
    capacity: int
    count: int
    utilization: float
    terminal_count: int
    events: int
    partial_events: int   # PARTIAL + FAILED
    elapsed_cost: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


FIELDNAMES = [
    "day", "shelf_id", "goods_type", "capacity", "count", "utilization",
    "terminal_count", "events", "partial_events", "elapsed_cost",
]


def to_rows(day: DayResult) -> List[RowOccupancy]:
    return [
        RowOccupancy(
            day=day.day,
            shelf_id=s.shelf_id,
            goods_type=s.goods_type.value,
            capacity=s.capacity,
            count=s.count,
            utilization=s.utilization,
            terminal_count=day.terminal_count,
            events=len(day.outcomes),
            partial_events=day.not_ok_count,
            elapsed_cost=day.elapsed_cost,
        )
        for s in day.shelves
    ]


def to_frame(days: Iterable[DayResult]) -> pd.DataFrame:
    rows = [r.to_dict() for d in days for r in to_rows(d)]
    return pd.DataFrame(rows, columns=FIELDNAMES)


def occupancy_kpis(days: List[DayResult]) -> Dict[str, float]:
    utils = [s.utilization for d in days for s in d.shelves]
    terminal = [d.terminal_count for d in days]
    return {
        "util_avg": float(np.mean(utils)) if utils else 0.0,
        "util_max": float(np.max(utils)) if utils else 0.0,
        "terminal_avg": float(np.mean(terminal)) if terminal else 0.0,
        "terminal_max": int(np.max(terminal)) if terminal else 0,
    }


def shelf_report_text(shelves: List[ShelfSnapshot]) -> str:
    """Reporte diario por estante: capacidad, tipo y nombres distintos presentes."""
    s = ["Daily Shelf Report:"]
    for sh in shelves:
        s.append(f"Shelf '{sh.shelf_id}' - Capacity: {sh.capacity}, Goods Type: {sh.goods_type.value}")
        if sh.item_names:
            s.append("Items:")
            # nombres distintos en orden de aparición
            s += [f"  - {name}" for name in dict.fromkeys(sh.item_names)]
        else:
            s.append("No items in the shelf.")
        s.append("")
    return "\n".join(s)


def day_report_text(day: DayResult) -> str:
    head = [f"Simulation Day: {day.day}"]
    head += [f"[{o.status}] {o.kind} {o.item_name} x{o.requested}: "
             f"moved={o.transferred} remaining={o.remaining} cost={o.elapsed_cost:g}"
             for o in day.outcomes]
    return "\n".join(head + [shelf_report_text(day.shelves)])


def history_text(name: str, history: List[str]) -> str:
    if not history:
        return f"Item '{name}' not found in the warehouse."
    return "\n".join([f"History for item '{name}':"] + [f"  - {h}" for h in history])
