"""
Прикладной слой контекста бронирования.

Содержит сервис приложения, который проверяет запросы, координирует
работу репозитория комнат и сервиса уведомлений и изменяет состояние комнат.
"""

from datetime import datetime
from typing import List, Optional

from shared_kernel import (
    BookingCancellationException,
    EntityId,
    InvalidBookingRequestException,
    RoomNotFoundException,
)
from shared_kernel.infrastructure import ConsoleLogger

from . import interfaces as ports
from .domain import Booking, Room

MISSING_BOOKING_ARGUMENTS = (
    "Бронирование требует корректных времени начала и окончания, а также id комнаты"
)
MISSING_TIME_RANGE = "Необходимо указать и время начала, и время окончания"
END_BEFORE_START = "Время окончания должно быть позже времени начала"
BOOKING_IN_THE_PAST = "Нельзя бронировать время в прошлом"
BOOKING_ALREADY_STARTED = "Нельзя отменить начавшееся или завершенное бронирование"
MIXED_TIME_KINDS = (
    "Время должно быть задано либо везде с часовым поясом, либо везде без него"
)


def _is_aware(moment: datetime) -> bool:
    return moment.tzinfo is not None and moment.utcoffset() is not None


def _check_same_kind(*moments: datetime) -> None:
    if len({_is_aware(m) for m in moments}) > 1:
        raise InvalidBookingRequestException(MIXED_TIME_KINDS)


class BookingApplicationService:
    """Сервис приложения для бронирования переговорных комнат."""

    def __init__(
        self,
        clock: ports.IClock,
        room_repository: ports.IRoomRepository,
        notification_service: ports.INotificationService,
        logger: Optional[ports.ILogger] = None,
    ):
        self._clock = clock
        self._rooms = room_repository
        self._notifications = notification_service
        self._logger = logger or ConsoleLogger()

    def book_room(
        self,
        room_id: Optional[EntityId],
        start_time: Optional[datetime],
        end_time: Optional[datetime],
    ) -> bool:
        """Бронирует комнату на интервал [start_time, end_time).

        Возвращает False, если комната занята. Ошибки уведомления
        не влияют на результат.
        """
        if not room_id or start_time is None or end_time is None:
            raise InvalidBookingRequestException(MISSING_BOOKING_ARGUMENTS)

        _check_same_kind(start_time, end_time)
        if end_time <= start_time:
            raise InvalidBookingRequestException(END_BEFORE_START)

        now = self._clock.now()
        _check_same_kind(start_time, now)
        if start_time < now:
            raise InvalidBookingRequestException(BOOKING_IN_THE_PAST)

        room = self._rooms.find_by_id(room_id)
        if room is None:
            raise RoomNotFoundException(room_id)

        if not room.is_available(start_time, end_time):
            self._logger.debug(
                "Room is not available", room_id=room_id, start=start_time, end=end_time
            )
            return False

        booking = Booking.create(room_id=room_id, start_time=start_time, end_time=end_time)
        room.add_booking(booking)
        self._rooms.save(room)
        self._logger.info("Room booked", booking_id=booking.id, room_id=room_id)

        try:
            self._notifications.send_booking_confirmation(booking)
        except Exception as e:
            self._logger.warning(
                "Booking confirmation was not sent",
                booking_id=booking.id,
                error=str(e),
            )

        return True

    def get_available_rooms(
        self, start_time: Optional[datetime], end_time: Optional[datetime]
    ) -> List[Room]:
        """Возвращает все комнаты, свободные на указанный интервал."""
        if start_time is None or end_time is None:
            raise InvalidBookingRequestException(MISSING_TIME_RANGE)

        _check_same_kind(start_time, end_time)
        if end_time <= start_time:
            raise InvalidBookingRequestException(END_BEFORE_START)

        # Каждая комната проверяется: это фильтр, а не поиск
        return [
            room
            for room in self._rooms.find_all()
            if room.is_available(start_time, end_time)
        ]

    def cancel_booking(self, booking_id: EntityId) -> bool:
        """Отменяет будущее бронирование.

        Возвращает False, если бронирование не найдено ни в одной комнате.
        """
        room = next(
            (r for r in self._rooms.find_all() if r.has_booking(booking_id)), None
        )
        if room is None:
            return False

        booking = room.get_booking(booking_id)
        if self._clock.now() >= booking.start_time:
            raise BookingCancellationException(BOOKING_ALREADY_STARTED)

        room.remove_booking(booking_id)
        self._rooms.save(room)
        self._logger.info("Booking cancelled", booking_id=booking_id, room_id=room.id)

        try:
            self._notifications.send_cancellation_confirmation(booking)
        except Exception as e:
            self._logger.warning(
                "Cancellation confirmation was not sent",
                booking_id=booking_id,
                error=str(e),
            )

        return True
