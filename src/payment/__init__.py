"""
Модуль контекста платежей (Payment Context).

Отвечает за списание оплаты через платежный шлюз,
учет успешных платежей и уведомление получателя.
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    'domain',
    'application',
    'infrastructure',
    'interfaces',
]
