"""
Тесты для сборки приложения.
"""
from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from booking.infrastructure import (
    FixedClock,
    InMemoryRoomRepository,
    JsonFileRoomRepository,
    RecordingNotificationService,
)
from bootstrap import AppSettings, RoomSeed, bootstrap_app

NOW = datetime(2026, 1, 30, 10, 0)
ROOMS = [RoomSeed(id="room1", name="Большая"), RoomSeed(id="room2", name="Малая")]


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings()

        assert settings.storage_path is None
        assert settings.rooms == []
        assert settings.verbose_logging is False
        assert settings.payment_success_rate == 1.0

    def test_from_env(self):
        settings = AppSettings.from_env(
            {
                "ROOM_BOOKING_STORAGE_PATH": "/tmp/rooms.json",
                "ROOM_BOOKING_VERBOSE": "true",
                "ROOM_BOOKING_PAYMENT_SUCCESS_RATE": "0.25",
                "UNRELATED": "ignored",
            }
        )

        assert settings.storage_path == Path("/tmp/rooms.json")
        assert settings.verbose_logging is True
        assert settings.payment_success_rate == 0.25

    def test_from_env_ignores_blank_values(self):
        assert AppSettings.from_env({"ROOM_BOOKING_STORAGE_PATH": ""}).storage_path is None

    def test_invalid_success_rate(self):
        with pytest.raises(ValidationError):
            AppSettings.from_env({"ROOM_BOOKING_PAYMENT_SUCCESS_RATE": "2"})


class TestBootstrapApp:
    def test_wires_in_memory_components(self):
        app = bootstrap_app(AppSettings(rooms=ROOMS), clock=FixedClock(NOW))

        assert isinstance(app["room_repository"], InMemoryRoomRepository)
        assert {room.id for room in app["room_repository"].find_all()} == {
            "room1",
            "room2",
        }

    def test_booking_flow(self):
        notifier = RecordingNotificationService()
        app = bootstrap_app(
            AppSettings(rooms=ROOMS), clock=FixedClock(NOW), notifier=notifier
        )
        service = app["booking_service"]
        start, end = NOW + timedelta(hours=1), NOW + timedelta(hours=2)

        assert service.book_room("room1", start, end)
        assert [r.id for r in service.get_available_rooms(start, end)] == ["room2"]
        assert len(notifier.sent) == 1

    def test_json_storage_keeps_bookings_between_runs(self, tmp_path):
        settings = AppSettings(storage_path=tmp_path / "rooms.json", rooms=ROOMS)
        start, end = NOW + timedelta(hours=1), NOW + timedelta(hours=2)

        first = bootstrap_app(settings, clock=FixedClock(NOW))
        assert isinstance(first["room_repository"], JsonFileRoomRepository)
        first["booking_service"].book_room("room1", start, end)

        second = bootstrap_app(settings, clock=FixedClock(NOW))
        room = second["room_repository"].find_by_id("room1")
        assert len(room.bookings) == 1
        assert second["booking_service"].book_room("room1", start, end) is False

    def test_payment_processor_is_wired(self):
        app = bootstrap_app(AppSettings())

        assert app["payment_processor"].process_payment(Decimal("10"), "a@example.com")
        assert len(app["payment_repository"].list_payments()) == 1
