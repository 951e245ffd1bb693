"""
Сборка приложения: настройки и связывание компонентов.
"""
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from booking.application import BookingApplicationService
from booking.domain import Room
from booking.infrastructure import (
    ConsoleNotificationService,
    InMemoryRoomRepository,
    JsonFileRoomRepository,
    SystemClock,
)
from booking.interfaces import IClock, INotificationService, IRoomRepository
from payment.application import PaymentProcessor
from payment.infrastructure import (
    ConsolePaymentNotificationClient,
    DummyPaymentGateway,
    InMemoryPaymentRepository,
)
from shared_kernel.infrastructure import ConsoleLogger
from shared_kernel.interfaces import ILogger

ENV_PREFIX = "ROOM_BOOKING_"


class RoomSeed(BaseModel):
    """Описание комнаты, создаваемой при старте."""

    id: str = Field(..., min_length=1)
    name: str


class AppSettings(BaseModel):
    """Настройки приложения."""

    storage_path: Optional[Path] = None
    rooms: List[RoomSeed] = Field(default_factory=list)
    verbose_logging: bool = False
    payment_success_rate: float = Field(1.0, ge=0.0, le=1.0)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppSettings":
        """Читает настройки из переменных окружения с префиксом ROOM_BOOKING_."""
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for field_name, env_name in (
            ("storage_path", "STORAGE_PATH"),
            ("verbose_logging", "VERBOSE"),
            ("payment_success_rate", "PAYMENT_SUCCESS_RATE"),
        ):
            raw = environ.get(ENV_PREFIX + env_name)
            if raw is not None and raw != "":
                values[field_name] = raw
        return cls.model_validate(values)


def build_room_repository(
    settings: AppSettings, logger: ILogger
) -> IRoomRepository:
    """Создает репозиторий комнат и добавляет недостающие комнаты из настроек."""
    if settings.storage_path is not None:
        repository: IRoomRepository = JsonFileRoomRepository(
            str(settings.storage_path), logger=logger
        )
    else:
        repository = InMemoryRoomRepository()

    for seed in settings.rooms:
        if repository.find_by_id(seed.id) is None:
            repository.save(Room(id=seed.id, name=seed.name))
    return repository


def bootstrap_app(
    settings: Optional[AppSettings] = None,
    clock: Optional[IClock] = None,
    notifier: Optional[INotificationService] = None,
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or AppSettings()
    logger = ConsoleLogger(verbose=settings.verbose_logging)

    # 1. Хранилище комнат
    room_repository = build_room_repository(settings, logger)

    # 2. Сервис бронирования, все зависимости передаются явно
    booking_service = BookingApplicationService(
        clock=clock or SystemClock(),
        room_repository=room_repository,
        notification_service=notifier or ConsoleNotificationService(logger),
        logger=logger,
    )

    # 3. Контекст платежей
    payment_repository = InMemoryPaymentRepository()
    payment_processor = PaymentProcessor(
        payment_gateway=DummyPaymentGateway(settings.payment_success_rate),
        payment_repository=payment_repository,
        notification_client=ConsolePaymentNotificationClient(logger),
        logger=logger,
    )

    return {
        "logger": logger,
        "room_repository": room_repository,
        "booking_service": booking_service,
        "payment_repository": payment_repository,
        "payment_processor": payment_processor,
    }
