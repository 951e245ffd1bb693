"""
Модуль контекста бронирования (Booking Context).

Отвечает за бронирование переговорных комнат, включая:
- Проверку запросов на бронирование
- Проверку доступности комнат
- Отмену будущих бронирований
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    'domain',
    'application',
    'infrastructure',
    'interfaces',
]
