"""
Общие фикстуры для тестов.
"""
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from booking.domain import Booking, Room
from booking.interfaces import IClock, INotificationService, IRoomRepository
from shared_kernel.interfaces import ILogger

NOW = datetime(2026, 1, 30, 10, 0)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def mock_clock(now: datetime) -> MagicMock:
    """Часы, всегда возвращающие фиксированное время."""
    clock = MagicMock(spec=IClock)
    clock.now.return_value = now
    return clock


@pytest.fixture
def mock_room_repository() -> MagicMock:
    """Фикстура для мокированного репозитория комнат."""
    repo = MagicMock(spec=IRoomRepository)
    repo.find_by_id.return_value = None
    repo.find_all.return_value = []
    return repo


@pytest.fixture
def mock_notification_service() -> MagicMock:
    return MagicMock(spec=INotificationService)


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock(spec=ILogger)


@pytest.fixture
def mock_room() -> MagicMock:
    """Мокированная комната."""
    room = MagicMock(spec=Room)
    room.id = "room1"
    return room


@pytest.fixture
def future_booking(now: datetime) -> Booking:
    return Booking.create(
        room_id="room1",
        start_time=now + timedelta(days=1),
        end_time=now + timedelta(days=1, hours=1),
    )


@pytest.fixture
def sample_room() -> Room:
    return Room(id="room1", name="Переговорная 1")
