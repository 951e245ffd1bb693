"""
Доменная модель контекста бронирования.

Содержит сущности комнаты и бронирования. Комната является
единственным владельцем своих бронирований.
"""

from datetime import datetime
from typing import Dict, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from shared_kernel import (
    BookingNotFoundException,
    BusinessRuleValidationException,
    EntityId,
    TimeRange,
    generate_id,
)


class Booking(BaseModel):
    """Бронирование переговорной комнаты."""

    model_config = ConfigDict(frozen=True)

    id: EntityId = Field(default_factory=generate_id)
    room_id: EntityId
    start_time: datetime
    end_time: datetime

    @model_validator(mode="after")
    def end_after_start(self) -> "Booking":
        if self.end_time <= self.start_time:
            raise ValueError("Время окончания должно быть позже времени начала")
        return self

    @property
    def period(self) -> TimeRange:
        return TimeRange(start=self.start_time, end=self.end_time)

    @classmethod
    def create(
        cls, room_id: EntityId, start_time: datetime, end_time: datetime
    ) -> "Booking":
        """Создает новое бронирование с новым идентификатором."""
        return cls(room_id=room_id, start_time=start_time, end_time=end_time)


class Room(BaseModel):
    """Переговорная комната."""

    id: EntityId
    name: str
    _bookings: Dict[EntityId, Booking] = PrivateAttr(default_factory=dict)

    @classmethod
    def restore(
        cls, id: EntityId, name: str, bookings: Iterable[Booking] = ()
    ) -> "Room":
        """Восстанавливает комнату вместе с ее бронированиями из хранилища."""
        room = cls(id=id, name=name)
        for booking in bookings:
            room.add_booking(booking)
        return room

    @property
    def bookings(self) -> List[Booking]:
        """Возвращает копию списка бронирований, упорядоченную по времени начала."""
        return sorted(self._bookings.values(), key=lambda b: b.start_time)

    def is_available(self, start_time: datetime, end_time: datetime) -> bool:
        """Проверяет, что ни одно бронирование не пересекается с интервалом."""
        requested = TimeRange(start=start_time, end=end_time)
        return not any(
            booking.period.overlaps(requested) for booking in self._bookings.values()
        )

    def add_booking(self, booking: Booking) -> None:
        """Добавляет бронирование.

        Пересечение с другими бронированиями должно быть проверено
        вызывающей стороной через is_available.
        """
        if booking.room_id != self.id:
            raise BusinessRuleValidationException(
                f"Бронирование {booking.id} относится к другой комнате"
            )
        if booking.id in self._bookings:
            raise BusinessRuleValidationException(
                f"Бронирование {booking.id} уже существует"
            )
        self._bookings[booking.id] = booking

    def remove_booking(self, booking_id: EntityId) -> Booking:
        if booking_id not in self._bookings:
            raise BookingNotFoundException(booking_id)
        return self._bookings.pop(booking_id)

    def has_booking(self, booking_id: EntityId) -> bool:
        return booking_id in self._bookings

    def get_booking(self, booking_id: EntityId) -> Booking:
        if booking_id not in self._bookings:
            raise BookingNotFoundException(booking_id)
        return self._bookings[booking_id]

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, Room):
            return NotImplemented
        return self.id == other.id
