"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, model_validator

# Общие типы идентификаторов
EntityId = str


def generate_id() -> EntityId:
    """Генерирует новый уникальный идентификатор."""
    return str(uuid4())


class TimeRange(BaseModel):
    """Полуоткрытый интервал времени [start, end)."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def end_after_start(self) -> "TimeRange":
        if self.end <= self.start:
            raise ValueError("Время окончания должно быть позже времени начала")
        return self

    @property
    def duration(self) -> timedelta:
        """Длительность интервала."""
        return self.end - self.start

    def overlaps(self, other: "TimeRange") -> bool:
        """Проверяет пересечение двух полуоткрытых интервалов."""
        return self.start < other.end and other.start < self.end


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class InvalidBookingRequestException(DomainException, ValueError):
    """Некорректные входные данные запроса на бронирование."""

    pass


class RoomNotFoundException(DomainException, LookupError):
    """Комната с указанным идентификатором не найдена."""

    def __init__(self, room_id: Optional[EntityId] = None):
        super().__init__("Комната не существует")
        self.room_id = room_id


class BookingNotFoundException(DomainException, LookupError):
    """Бронирование не найдено в комнате."""

    def __init__(self, booking_id: EntityId):
        super().__init__(f"Бронирование {booking_id} не найдено")
        self.booking_id = booking_id


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class BookingCancellationException(BusinessRuleValidationException):
    """Бронирование уже началось или завершилось и не может быть отменено."""

    pass


class NotificationException(DomainException):
    """Ошибка внешнего сервиса уведомлений."""

    pass


class InvalidPaymentRequestException(DomainException, ValueError):
    """Некорректные входные данные для платежа."""

    pass
