# whsim/storage/pools.py
from typing import List

from whsim.storage.items import GoodsType, Item
from whsim.utils.logger import get_logger

logger = get_logger(__name__)


class ResourcePool:
    """
    Contenedor acotado de ítems con orden FIFO.

    Invariante: 0 <= len(pool) <= capacity en todo momento. Un add sobre un
    pool lleno descarta el ítem (warning), nunca lo encola ni lanza.
    """

    label = "Pool"

    def __init__(self, capacity: int):
        if int(capacity) < 0:
            raise ValueError(f"capacity debe ser >= 0 (recibido {capacity})")
        self._capacity = int(capacity)
        self._items: List[Item] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def free_space(self) -> int:
        return max(0, self._capacity - len(self._items))

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def add(self, item: Item) -> bool:
        if len(self._items) < self._capacity:
            self._items.append(item)
            return True
        logger.warning("%s is at full capacity. Cannot add item '%s'.", self.label, item.name)
        return False

    def remove(self, item: Item) -> bool:
        # por identidad: puede haber varios ítems con el mismo nombre
        for idx, it in enumerate(self._items):
            if it is item:
                del self._items[idx]
                return True
        logger.warning("Item '%s' not found in %s.", item.name, self.label)
        return False

    def first(self):
        return self._items[0] if self._items else None

    def snapshot(self) -> List[Item]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self):
        return f"{self.label}({len(self._items)}/{self._capacity})"


class Terminal(ResourcePool):
    """Zona de recepción compartida; acepta cualquier tipo de mercancía."""

    label = "Terminal"

    def configure(self, capacity: int) -> None:
        if int(capacity) < 0:
            raise ValueError(f"capacity debe ser >= 0 (recibido {capacity})")
        # no se expulsan ítems: si queda por encima de la nueva capacidad,
        # los siguientes add simplemente fallan hasta que baje
        self._capacity = int(capacity)
        logger.info("Terminal capacity has been configured to %d.", self._capacity)


class Shelf(ResourcePool):
    """Estante restringido a un solo GoodsType, con costos de traslado."""

    def __init__(
        self,
        shelf_id: str,
        capacity: int,
        goods_type: GoodsType,
        terminal_to_shelf_cost: float = 0.0,
        shelf_to_terminal_cost: float = 0.0,
    ):
        super().__init__(capacity)
        if terminal_to_shelf_cost < 0 or shelf_to_terminal_cost < 0:
            raise ValueError("Los costos de traslado deben ser >= 0")
        self._shelf_id = str(shelf_id)
        self._goods_type = GoodsType.parse(goods_type)
        self._t2s = float(terminal_to_shelf_cost)
        self._s2t = float(shelf_to_terminal_cost)

    @property
    def label(self) -> str:
        return f"Shelf '{self._shelf_id}'"

    @property
    def shelf_id(self) -> str:
        return self._shelf_id

    @property
    def goods_type(self) -> GoodsType:
        return self._goods_type

    @property
    def terminal_to_shelf_cost(self) -> float:
        return self._t2s

    @property
    def shelf_to_terminal_cost(self) -> float:
        return self._s2t

    def accepts(self, goods_type: GoodsType) -> bool:
        return self._goods_type == goods_type
