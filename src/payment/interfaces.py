"""
Интерфейсы (порты) для контекста платежей.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from shared_kernel.interfaces import ILogger  # noqa: F401

from .domain import PaymentApiResponse, PaymentStatus


class IPaymentGateway(Protocol):
    """Интерфейс для взаимодействия с платежным шлюзом."""

    def charge(self, amount: Decimal) -> PaymentApiResponse: ...


class IPaymentRepository(Protocol):
    """Интерфейс репозитория для платежей."""

    def save_payment(self, amount: Decimal, status: PaymentStatus) -> None: ...


class IPaymentNotificationClient(Protocol):
    """Интерфейс для уведомления получателя о платеже."""

    def send_payment_confirmation(self, recipient: str, amount: Decimal) -> None: ...
