from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from whsim.config.warehouse_config import WarehouseConfig
from whsim.storage.items import GoodsType
from whsim.warehouse.warehouse import Warehouse

EventSpecKind = Literal["delivery", "pickup"]


@dataclass
class ShelfSpec:
    shelf_id: str
    capacity: int
    goods_type: str
    terminal_to_shelf_cost: float = 0.0
    shelf_to_terminal_cost: float = 0.0


@dataclass
class EventSpec:
    day: int
    goods_type: str
    quantity: int
    item_name: str
    interval_days: Optional[int] = None   # None = evento único


@dataclass
class ScenarioSpec:
    """Escenario completo: configuración, estantes, catálogo, agendas y días a correr."""
    config: WarehouseConfig
    shelves: List[ShelfSpec]
    deliveries: List[EventSpec]
    pickups: List[EventSpec]
    days: int
    catalog: Dict[str, str] = field(default_factory=dict)
    history_queries: List[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ScenarioSpec":
        return ScenarioSpec(
            config=WarehouseConfig.from_dict(d.get("config", {})),
            shelves=[ShelfSpec(**s) for s in d.get("shelves", [])],
            deliveries=[EventSpec(**e) for e in d.get("deliveries", [])],
            pickups=[EventSpec(**e) for e in d.get("pickups", [])],
            days=int(d.get("days", 0)),
            catalog=dict(d.get("catalog", {})),
            history_queries=list(d.get("history_queries", [])),
        )

    @staticmethod
    def default() -> "ScenarioSpec":
        """Almacén de ejemplo por código (no necesitas JSON)."""
        return ScenarioSpec.from_dict({
            "config": {
                "is_cool_storage": True,
                "is_dry_storage": True,
                "is_hazardous": False,
                "terminal_capacity": 1000,
            },
            "shelves": [
                {"shelf_id": "A1", "capacity": 500, "goods_type": "DryGoods",
                 "terminal_to_shelf_cost": 1, "shelf_to_terminal_cost": 1},
                {"shelf_id": "A2", "capacity": 500, "goods_type": "DryGoods",
                 "terminal_to_shelf_cost": 1, "shelf_to_terminal_cost": 1},
                {"shelf_id": "B1", "capacity": 500, "goods_type": "Refrigerated",
                 "terminal_to_shelf_cost": 1, "shelf_to_terminal_cost": 1},
            ],
            "catalog": {"Rice": "DryGoods", "Milk": "Refrigerated"},
            "deliveries": [
                {"day": 1, "goods_type": "DryGoods", "quantity": 200, "item_name": "Rice"},
                {"day": 3, "goods_type": "Refrigerated", "quantity": 150, "item_name": "Milk"},
                {"day": 7, "goods_type": "DryGoods", "quantity": 250, "item_name": "Rice", "interval_days": 7},
                {"day": 7, "goods_type": "Refrigerated", "quantity": 250, "item_name": "Milk", "interval_days": 7},
            ],
            "pickups": [
                {"day": 2, "goods_type": "DryGoods", "quantity": 150, "item_name": "Rice"},
                {"day": 4, "goods_type": "Refrigerated", "quantity": 140, "item_name": "Milk"},
                {"day": 7, "goods_type": "DryGoods", "quantity": 200, "item_name": "Rice", "interval_days": 7},
            ],
            "days": 5,
            "history_queries": ["Rice_100"],
        })

    def validate(self) -> None:
        self.config.validate()
        assert self.days >= 0, "days debe ser >= 0"
        ids = [s.shelf_id for s in self.shelves]
        assert len(ids) == len(set(ids)), "shelf_id repetido"
        for s in self.shelves:
            assert s.capacity >= 0, f"Capacidad negativa en estante {s.shelf_id}"
            GoodsType.parse(s.goods_type)
        for e in self.deliveries + self.pickups:
            assert e.quantity >= 0, f"Cantidad negativa para '{e.item_name}'"
            assert e.interval_days is None or e.interval_days > 0, \
                f"interval_days debe ser > 0 para '{e.item_name}'"
            GoodsType.parse(e.goods_type)

    def build(self) -> Warehouse:
        wh = Warehouse(self.config)
        for s in self.shelves:
            wh.add_shelf(s.shelf_id, s.capacity, GoodsType.parse(s.goods_type),
                         s.terminal_to_shelf_cost, s.shelf_to_terminal_cost)
        for name, gt in self.catalog.items():
            wh.add_item(name, GoodsType.parse(gt))
        for e in self.deliveries:
            if e.interval_days is None:
                wh.add_delivery(e.day, e.goods_type, e.quantity, e.item_name)
            else:
                wh.add_weekly_delivery(e.interval_days, e.day, e.goods_type, e.quantity, e.item_name)
        for e in self.pickups:
            if e.interval_days is None:
                wh.add_pickup(e.day, e.goods_type, e.quantity, e.item_name)
            else:
                wh.add_weekly_pickup(e.interval_days, e.day, e.goods_type, e.quantity, e.item_name)
        return wh

    def summary(self) -> str:
        s = []
        s.append("=== ESCENARIO DEL ALMACÉN ===")
        c = self.config
        s.append(f"Terminal: capacidad {c.terminal_capacity}")
        s.append(f"Almacenamiento: frío {'ON' if c.is_cool_storage else 'OFF'}, "
                 f"seco {'ON' if c.is_dry_storage else 'OFF'}, "
                 f"peligroso {'ON' if c.is_hazardous else 'OFF'}")
        s.append(f"Días a simular: {self.days}")
        s.append("\nEstantes:")
        s += [f"- {x.shelf_id}: {x.goods_type} cap={x.capacity} "
              f"(T→E {x.terminal_to_shelf_cost}, E→T {x.shelf_to_terminal_cost})" for x in self.shelves]
        s.append("\nEntregas:")
        s += [_event_line(e) for e in self.deliveries]
        s.append("\nRetiros:")
        s += [_event_line(e) for e in self.pickups]
        return "\n".join(s)


def _event_line(e: EventSpec) -> str:
    line = f"- día {e.day}: {e.quantity} x {e.item_name} ({e.goods_type})"
    if e.interval_days is not None:
        line += f" cada {e.interval_days} días"
    return line
