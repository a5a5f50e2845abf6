from dataclasses import dataclass
from typing import Any, Dict

from whsim.sim.events import RECURRENCE_HORIZON_DAYS
from whsim.storage.items import GoodsType


@dataclass
class WarehouseConfig:
    """Configuración estática del almacén; de solo lectura una vez construido."""
    is_cool_storage: bool = True
    is_dry_storage: bool = True
    is_hazardous: bool = False
    terminal_capacity: int = 1000
    recurrence_horizon_days: int = RECURRENCE_HORIZON_DAYS

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "WarehouseConfig":
        return WarehouseConfig(**d)

    def supports(self, goods_type: GoodsType) -> bool:
        flags = {
            GoodsType.DRY_GOODS: self.is_dry_storage,
            GoodsType.REFRIGERATED: self.is_cool_storage,
            GoodsType.HAZARDOUS: self.is_hazardous,
        }
        return flags[GoodsType.parse(goods_type)]

    def validate(self) -> None:
        assert self.terminal_capacity >= 0, "terminal_capacity debe ser >= 0"
        assert self.recurrence_horizon_days >= 0, "recurrence_horizon_days debe ser >= 0"
