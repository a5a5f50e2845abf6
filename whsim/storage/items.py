# whsim/storage/items.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional

from whsim.utils.logger import get_logger

logger = get_logger(__name__)


class GoodsType(str, Enum):
    """Clasificación que decide en qué estantes puede vivir un ítem."""

    DRY_GOODS = "DryGoods"
    REFRIGERATED = "Refrigerated"
    HAZARDOUS = "Hazardous"

    @staticmethod
    def parse(value: "GoodsType | str") -> "GoodsType":
        """Acepta el valor ("DryGoods") o el nombre del miembro ("DRY_GOODS")."""
        if isinstance(value, GoodsType):
            return value
        try:
            return GoodsType(value)
        except ValueError:
            pass
        try:
            return GoodsType[str(value).upper()]
        except KeyError:
            raise ValueError(f"Tipo de mercancía no soportado: {value!r}") from None


@dataclass(frozen=True)
class ItemTemplate:
    """Plantilla inmutable que viaja en cada evento (se copia, no se comparte)."""
    name: str
    goods_type: GoodsType

    def unit_name(self, seq: int) -> str:
        return f"{self.name}_{seq}"


@dataclass(eq=False)
class Item:
    """
    Unidad física dentro del almacén.
    La identidad es la referencia: dos ítems con el mismo nombre son distintos.
    """
    name: str
    goods_type: GoodsType
    location_history: List[str] = field(default_factory=list)

    def update_location_history(self, entry: str) -> None:
        self.location_history.append(entry)

    @staticmethod
    def from_template(template: ItemTemplate, seq: int) -> "Item":
        return Item(name=template.unit_name(seq), goods_type=template.goods_type)


class ItemHistory:
    """Registro append-only de todos los ítems que pasaron por el almacén."""

    def __init__(self):
        self._items: List[Item] = []

    def add(self, item: Item) -> None:
        self._items.append(item)

    def find_by_name(self, name: str) -> Optional[Item]:
        # primer match: con entregas recurrentes los nombres se repiten
        for item in self._items:
            if item.name == name:
                return item
        return None

    def history_of(self, name: str) -> List[str]:
        item = self.find_by_name(name)
        if item is None:
            logger.warning("Item '%s' not found in the warehouse.", name)
            return []
        return list(item.location_history)

    def count_by_name(self) -> Dict[str, int]:
        d: Dict[str, int] = {}
        for it in self._items:
            d[it.name] = d.get(it.name, 0) + 1
        return d

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)
