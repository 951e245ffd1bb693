"""
Прикладной слой контекста платежей.
"""

from decimal import Decimal
from typing import Optional

from shared_kernel import InvalidPaymentRequestException
from shared_kernel.infrastructure import ConsoleLogger

from . import interfaces as ports
from .domain import PaymentStatus


class PaymentProcessor:
    """Сервис приложения для проведения платежей."""

    def __init__(
        self,
        payment_gateway: ports.IPaymentGateway,
        payment_repository: ports.IPaymentRepository,
        notification_client: ports.IPaymentNotificationClient,
        logger: Optional[ports.ILogger] = None,
    ):
        self._gateway = payment_gateway
        self._payments = payment_repository
        self._notifications = notification_client
        self._logger = logger or ConsoleLogger()

    def process_payment(self, amount: Decimal, recipient: str) -> bool:
        """Списывает сумму через шлюз и возвращает признак успеха.

        Успешный платеж сохраняется и подтверждается получателю,
        неуспешный не оставляет следов.
        """
        if amount is None or not Decimal(amount).is_finite() or amount <= 0:
            raise InvalidPaymentRequestException("Сумма платежа должна быть положительной")
        if not recipient or not recipient.strip():
            raise InvalidPaymentRequestException("Не указан получатель платежа")

        response = self._gateway.charge(amount)
        if not response.success:
            self._logger.warning("Payment declined", amount=amount, recipient=recipient)
            return False

        self._payments.save_payment(amount, PaymentStatus.SUCCESS)
        self._logger.info(
            "Payment processed",
            amount=amount,
            transaction_id=response.transaction_id,
        )

        try:
            self._notifications.send_payment_confirmation(recipient, amount)
        except Exception as e:
            self._logger.warning(
                "Payment confirmation was not sent", recipient=recipient, error=str(e)
            )

        return True
