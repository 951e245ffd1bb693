"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев и других интерфейсов,
зависимые от конкретных технологий (файлы, консоль, системное время).
"""
import json
import os
import tempfile
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from shared_kernel import EntityId, NotificationException
from shared_kernel.infrastructure import ConsoleLogger

from . import interfaces as ports
from .domain import Booking, Room


class SystemClock(ports.IClock):
    """Системные часы.

    Без часового пояса возвращает локальное "наивное" время.
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FixedClock(ports.IClock):
    """Часы с фиксированным временем для тестов и демонстраций."""

    def __init__(self, current: datetime):
        self._current = current

    def now(self) -> datetime:
        return self._current

    def set(self, current: datetime) -> None:
        self._current = current


class InMemoryRoomRepository(ports.IRoomRepository):
    """Реализация репозитория комнат в памяти."""

    def __init__(self, rooms: Iterable[Room] = ()):
        self._rooms: Dict[EntityId, Room] = {}
        for room in rooms:
            self.save(room)

    def find_by_id(self, room_id: EntityId) -> Optional[Room]:
        return self._rooms.get(room_id)

    def find_all(self) -> List[Room]:
        return list(self._rooms.values())

    def save(self, room: Room) -> None:
        self._rooms[room.id] = room


class JsonFileRoomRepository(ports.IRoomRepository):
    """Репозиторий комнат, хранящий состояние в JSON-файле."""

    def __init__(self, file_path: str, logger: Optional[ports.ILogger] = None):
        """
        Инициализирует репозиторий.

        Args:
            file_path: Путь к JSON-файлу с данными
            logger: Логгер, по умолчанию ConsoleLogger
        """
        self._file_path = Path(file_path)
        self._logger = logger or ConsoleLogger()
        self._data: Dict[EntityId, Room] = {}
        self._load_data()

    def _load_data(self) -> None:
        """Загружает данные из JSON-файла."""
        if not self._file_path.exists():
            self._data = {}
            return

        with open(self._file_path, "r", encoding="utf-8") as f:
            raw_data = f.read()

        if not raw_data.strip():
            self._data = {}
            return

        items = json.loads(raw_data)
        self._data = {}
        for item in items:
            room = Room.restore(
                id=item["id"],
                name=item["name"],
                bookings=[Booking.model_validate(b) for b in item.get("bookings", [])],
            )
            self._data[room.id] = room
        self._logger.debug(
            "Rooms loaded", path=str(self._file_path), count=len(self._data)
        )

    def _save_data(self, rooms: Dict[EntityId, Room]) -> None:
        """Сохраняет данные в JSON-файл через временный файл и замену."""
        # Создаем директорию, если она не существует
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        data = [
            {
                **room.model_dump(mode="json"),
                "bookings": [b.model_dump(mode="json") for b in room.bookings],
            }
            for room in rooms.values()
        ]

        fd, tmp_path = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self._file_path)
        except Exception:
            os.unlink(tmp_path)
            raise

    def find_by_id(self, room_id: EntityId) -> Optional[Room]:
        return self._data.get(room_id)

    def find_all(self) -> List[Room]:
        return list(self._data.values())

    def save(self, room: Room) -> None:
        # Состояние в памяти меняется только после успешной записи файла
        rooms = {**self._data, room.id: room}
        self._save_data(rooms)
        self._data = rooms


class ConsoleNotificationService(ports.INotificationService):
    """Заглушка сервиса уведомлений, выводящая сообщения в лог."""

    def __init__(self, logger: Optional[ports.ILogger] = None):
        self._logger = logger or ConsoleLogger()

    def send_booking_confirmation(self, booking: Booking) -> None:
        self._logger.info(
            "Booking confirmation",
            booking_id=booking.id,
            room_id=booking.room_id,
            start=booking.start_time,
            end=booking.end_time,
        )

    def send_cancellation_confirmation(self, booking: Booking) -> None:
        self._logger.info(
            "Cancellation confirmation",
            booking_id=booking.id,
            room_id=booking.room_id,
        )


class RecordingNotificationService(ports.INotificationService):
    """Сервис уведомлений, запоминающий отправленные сообщения.

    При fail=True каждая отправка завершается NotificationException.
    """

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[Tuple[str, Booking]] = []

    def send_booking_confirmation(self, booking: Booking) -> None:
        self._send("booking_confirmation", booking)

    def send_cancellation_confirmation(self, booking: Booking) -> None:
        self._send("cancellation_confirmation", booking)

    def _send(self, kind: str, booking: Booking) -> None:
        if self.fail:
            raise NotificationException(f"Не удалось отправить уведомление {kind}")
        self.sent.append((kind, booking))
