from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Iterator, List, Literal, Union

from whsim.storage.items import GoodsType, ItemTemplate

EventKind = Literal["DELIVERY", "PICKUP"]

# 1000 semanas: "suficiente" para cualquier corrida práctica
RECURRENCE_HORIZON_DAYS = 7 * 1000


class InvalidRecurrenceError(ValueError):
    """Intervalo de recurrencia no positivo."""


@dataclass(frozen=True)
class Event:
    kind: EventKind
    day: int
    goods_type: GoodsType
    quantity: int
    template: ItemTemplate

    def __post_init__(self):
        if self.quantity < 0:
            raise ValueError(f"quantity debe ser >= 0 (recibido {self.quantity})")

    def due_date(self, start: Union[date, datetime]) -> Union[date, datetime]:
        """Fecha calendario del evento dado el inicio de la simulación."""
        return start + timedelta(days=self.day)

    def on_day(self, day: int) -> "Event":
        return replace(self, day=day)


class EventSchedule:
    """
    Secuencia append-only de eventos en orden de inserción.
    La recurrencia semanal se expande al agendar, hasta `horizon_days`.
    """

    def __init__(self, kind: EventKind, horizon_days: int = RECURRENCE_HORIZON_DAYS):
        if horizon_days < 0:
            raise ValueError("horizon_days debe ser >= 0")
        self.kind = kind
        self.horizon_days = int(horizon_days)
        self._events: List[Event] = []

    def add_once(self, event: Event) -> None:
        self._check_kind(event)
        self._events.append(event)

    def add_weekly(self, interval_days: int, event: Event) -> int:
        """Agrega una copia por ocurrencia; devuelve cuántas se agregaron."""
        self._check_kind(event)
        if interval_days <= 0:
            raise InvalidRecurrenceError(
                f"interval_days debe ser > 0 (recibido {interval_days})"
            )
        added = 0
        for day in range(event.day, self.horizon_days + 1, interval_days):
            self._events.append(event.on_day(day))
            added += 1
        return added

    def due_on(self, day: int) -> Iterator[Event]:
        return (ev for ev in self._events if ev.day == day)

    def _check_kind(self, event: Event):
        if event.kind != self.kind:
            raise ValueError(f"Evento {event.kind} no pertenece a la agenda {self.kind}")

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))
