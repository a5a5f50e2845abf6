"""
Algoritmos de traslado entre Terminal y estantes.

Los "tiempos" de traslado son costos simulados: se acumulan en
`TransferOutcome.elapsed_cost` y nunca bloquean el hilo.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import TYPE_CHECKING, Any, Dict, Literal

from whsim.sim.events import Event, EventKind
from whsim.storage.items import GoodsType, Item
from whsim.utils.logger import get_logger

if TYPE_CHECKING:
    from whsim.warehouse.warehouse import Warehouse

logger = get_logger(__name__)

OutcomeStatus = Literal["SUCCESS", "PARTIAL", "FAILED"]


@dataclass
class TransferOutcome:
    kind: EventKind
    day: int
    item_name: str
    goods_type: GoodsType
    status: OutcomeStatus
    requested: int
    transferred: int      # unidades que llegaron a estante (entrega) o salieron de estante (retiro)
    remaining: int
    dropped: int = 0      # descartadas por capacidad
    shipped: int = 0      # enviadas fuera del almacén (solo retiros)
    elapsed_cost: float = 0.0
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "SUCCESS"

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["goods_type"] = self.goods_type.value
        return d


def _status(requested: int, remaining: int) -> OutcomeStatus:
    if remaining <= 0:
        return "SUCCESS"
    return "PARTIAL" if remaining < requested else "FAILED"


def process_delivery(event: Event, warehouse: "Warehouse") -> TransferOutcome:
    """
    Entrada de mercancía: acuña `quantity` ítems nuevos en la Terminal y luego
    los acomoda en los estantes del mismo tipo, en el orden de la lista.
    """
    tpl = event.template
    terminal = warehouse.terminal
    logger.info("Now processing delivery item: %s Count: %d", tpl.name, event.quantity)

    # 1) acuñar y dejar en Terminal (se registran aunque la Terminal los descarte)
    dropped = 0
    for seq in range(1, event.quantity + 1):
        item = Item.from_template(tpl, seq)
        if not terminal.add(item):
            dropped += 1
        item.update_location_history(f"{item.name} added to Terminal")
        warehouse.item_history.add(item)

    # 2) Terminal -> estantes
    remaining = event.quantity
    cost = 0.0
    for shelf in warehouse.shelves:
        if remaining == 0:
            break
        if not shelf.accepts(event.goods_type):
            continue
        to_move = min(remaining, shelf.free_space)
        for _ in range(to_move):
            # primer ítem de la Terminal, venga de donde venga
            item = terminal.first()
            if item is None:
                msg = ("Insufficient items in the terminal to fulfill the delivery request. "
                       "Items will not be transferred to the shelves.")
                logger.warning(msg)
                return TransferOutcome(
                    kind="DELIVERY", day=event.day, item_name=tpl.name,
                    goods_type=event.goods_type, status=_status(event.quantity, remaining),
                    requested=event.quantity, transferred=event.quantity - remaining,
                    remaining=remaining, dropped=dropped, elapsed_cost=cost, message=msg,
                )
            terminal.remove(item)
            shelf.add(item)
            item.update_location_history(f"{item.name} moved from Terminal to Shelf: {shelf.shelf_id}")
            cost += shelf.terminal_to_shelf_cost
            remaining -= 1

    # sin espacio en estantes: lo que sobra queda en la Terminal (parcial)
    if remaining > 0:
        msg = ("Insufficient shelf space of the correct GoodsType to process the entire delivery. "
               "Only a partial quantity has been added to the shelves.")
        logger.warning(msg)
    else:
        msg = "Delivery processed successfully."
        logger.info(msg)

    return TransferOutcome(
        kind="DELIVERY", day=event.day, item_name=tpl.name, goods_type=event.goods_type,
        status="SUCCESS" if remaining == 0 else "PARTIAL", requested=event.quantity,
        transferred=event.quantity - remaining, remaining=remaining,
        dropped=dropped, elapsed_cost=cost, message=msg,
    )


def process_pickup(event: Event, warehouse: "Warehouse") -> TransferOutcome:
    """
    Salida de mercancía: vacía estantes del tipo pedido hacia la Terminal y
    después despacha los primeros `quantity` ítems de la Terminal.

    El despacho toma el frente de la Terminal completa, sin filtrar por tipo
    ni por origen; puede sacar ítems que llegaron por otros eventos.
    """
    tpl = event.template
    terminal = warehouse.terminal
    logger.info("Now processing pickup item: %s Count: %d", tpl.name, event.quantity)

    remaining = event.quantity
    dropped = 0
    cost = 0.0
    for shelf in warehouse.shelves:
        if remaining == 0:
            break
        if not shelf.accepts(event.goods_type):
            continue
        candidates = [it for it in shelf.snapshot() if it.goods_type == event.goods_type]
        for item in candidates[:remaining]:
            shelf.remove(item)
            remaining -= 1
            if not terminal.add(item):
                dropped += 1
            item.update_location_history(f"{item.name} moved to Terminal from Shelf: {shelf.shelf_id}")
            cost += shelf.shelf_to_terminal_cost

    shipped = 0
    for item in terminal.snapshot()[: event.quantity]:
        terminal.remove(item)
        item.update_location_history(f"{item.name} has been sent out of the warehouse")
        shipped += 1

    if remaining == 0:
        msg = "Pickup processed successfully."
        logger.info(msg)
    else:
        msg = (f"Insufficient items in the shelves to fulfill the pickup request "
               f"({remaining} of {event.quantity} missing).")
        logger.warning(msg)

    return TransferOutcome(
        kind="PICKUP", day=event.day, item_name=tpl.name, goods_type=event.goods_type,
        status=_status(event.quantity, remaining), requested=event.quantity,
        transferred=event.quantity - remaining, remaining=remaining,
        dropped=dropped, shipped=shipped, elapsed_cost=cost, message=msg,
    )
