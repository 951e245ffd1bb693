"""
Общее ядро (Shared Kernel) для системы бронирования переговорных комнат.

Содержит общие типы данных и исключения, используемые в различных ограниченных контекстах.
"""

from .domain import (
    BookingCancellationException,
    BookingNotFoundException,
    BusinessRuleValidationException,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    InvalidBookingRequestException,
    InvalidPaymentRequestException,
    NotificationException,
    RoomNotFoundException,
    # Основные классы
    TimeRange,
    generate_id,
)

__all__ = [
    # Базовые типы
    "EntityId",
    "generate_id",
    # Основные классы
    "TimeRange",
    # Исключения
    "DomainException",
    "InvalidBookingRequestException",
    "RoomNotFoundException",
    "BookingNotFoundException",
    "BusinessRuleValidationException",
    "BookingCancellationException",
    "NotificationException",
    "InvalidPaymentRequestException",
]
