"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Protocol

from shared_kernel import EntityId
from shared_kernel.interfaces import ILogger  # noqa: F401

from .domain import Booking, Room


class IClock(Protocol):
    """Источник текущего времени."""

    def now(self) -> datetime: ...


class IRoomRepository(Protocol):
    """Интерфейс репозитория для комнат."""

    def find_by_id(self, room_id: EntityId) -> Optional[Room]: ...
    def find_all(self) -> List[Room]: ...
    def save(self, room: Room) -> None: ...


class INotificationService(Protocol):
    """Интерфейс сервиса уведомлений.

    Оба метода могут выбросить NotificationException.
    """

    def send_booking_confirmation(self, booking: Booking) -> None: ...
    def send_cancellation_confirmation(self, booking: Booking) -> None: ...
