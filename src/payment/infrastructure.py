"""
Инфраструктурный слой контекста платежей.
"""
import random
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import uuid4

from shared_kernel.infrastructure import ConsoleLogger

from . import interfaces as ports
from .domain import PaymentApiResponse, PaymentRecord, PaymentStatus


class DummyPaymentGateway(ports.IPaymentGateway):
    """Заглушка платежного шлюза для тестирования."""

    def __init__(self, success_rate: float = 1.0, seed: Optional[int] = None):
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError("Доля успешных платежей должна быть от 0 до 1")
        self.success_rate = success_rate
        self._random = random.Random(seed)
        self.processed_payments: Dict[str, PaymentApiResponse] = {}

    def charge(self, amount: Decimal) -> PaymentApiResponse:
        """Проводит списание через внешний платежный шлюз."""
        transaction_id = f"TXN-{uuid4().hex[:8].upper()}"
        success = self._random.random() < self.success_rate

        response = PaymentApiResponse(success=success, transaction_id=transaction_id)
        self.processed_payments[transaction_id] = response
        return response


class InMemoryPaymentRepository(ports.IPaymentRepository):
    """Реализация репозитория платежей в памяти."""

    def __init__(self):
        self._payments: List[PaymentRecord] = []

    def save_payment(self, amount: Decimal, status: PaymentStatus) -> None:
        self._payments.append(PaymentRecord(amount=amount, status=status))

    def list_payments(self) -> List[PaymentRecord]:
        return list(self._payments)


class ConsolePaymentNotificationClient(ports.IPaymentNotificationClient):
    """Заглушка клиента уведомлений, выводящая сообщения в лог."""

    def __init__(self, logger: Optional[ports.ILogger] = None):
        self._logger = logger or ConsoleLogger()

    def send_payment_confirmation(self, recipient: str, amount: Decimal) -> None:
        self._logger.info("Payment confirmation", recipient=recipient, amount=amount)
