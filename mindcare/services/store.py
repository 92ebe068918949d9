"""
Local data store.

Every collection is kept as one JSON blob per key in the ``kv_store`` table,
the way a browser app keeps them in localStorage. Reads and writes are
fail-soft: a broken blob or a database error is logged and reported through
the return value, never raised to the caller. Every read-append-write cycle
runs under one per-store lock, so concurrent requests queue instead of
overwriting each other.
"""
import json
import logging
import random
import string
import threading
import time
from datetime import date, datetime, timezone
from typing import Any, Callable, List, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..models import StoredItem
from ..schemas import (
    ChatMessage,
    CheckIn,
    DataSummary,
    ExportBundle,
    MoodEntry,
    Preferences,
    StreakState,
)
from . import analytics

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"

_BASE36 = string.digits + string.ascii_lowercase

_CHAT = TypeAdapter(List[ChatMessage])
_MOODS = TypeAdapter(List[MoodEntry])
_CHECK_INS = TypeAdapter(List[CheckIn])
_STREAK = TypeAdapter(StreakState)
_PREFS = TypeAdapter(Preferences)


class StoreError(Exception):
    """Base error for the data store"""
    pass


class BundleValidationError(StoreError):
    """Import bundle is malformed or incomplete"""
    pass


def _base36(n: int) -> str:
    out = ""
    while n:
        n, r = divmod(n, 36)
        out = _BASE36[r] + out
    return out or "0"


def generate_id() -> str:
    # millisecond clock + random tail; unique enough within one device
    return _base36(int(time.time() * 1000)) + "".join(random.choices(_BASE36, k=11))


def _dump(item: BaseModel) -> dict:
    return item.model_dump(by_alias=True, mode="json")


def _dump_all(items) -> list:
    return [_dump(i) for i in items]


class DataStore:
    def __init__(
        self,
        session_factory: sessionmaker,
        prefix: str = "mindcare_",
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._session_factory = session_factory
        self._clock = clock
        # serializes read-append-write cycles across worker threads
        self._lock = threading.RLock()
        self.keys = {
            "chat_history": f"{prefix}chat_history",
            "mood_data": f"{prefix}mood_data",
            "check_ins": f"{prefix}checkins",
            "preferences": f"{prefix}preferences",
            "streak": f"{prefix}streak",
        }
        self.initialize()

    def initialize(self):
        """Write default preferences and streak when they are missing."""
        with self._lock:
            if not self.get(self.keys["preferences"]):
                self.put(self.keys["preferences"], _dump(Preferences()))
            if not self.get(self.keys["streak"]):
                self.put(self.keys["streak"], _dump(StreakState()))

    # --------------------------------------------------
    # Generic key-value access
    # --------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        try:
            with self._session_factory() as db:
                row = db.get(StoredItem, key)
                raw = row.value if row is not None else None
        except SQLAlchemyError:
            logger.exception("Error retrieving data for key %s", key)
            return default

        if not raw:
            return default

        try:
            return json.loads(raw)
        except ValueError:
            logger.error("Corrupt data for key %s, using default", key)
            return default

    def put(self, key: str, value: Any) -> bool:
        return self.put_many({key: value})

    def put_many(self, items: dict[str, Any]) -> bool:
        """Write several keys in one transaction. False if nothing was written."""
        try:
            blobs = {k: json.dumps(v, ensure_ascii=False) for k, v in items.items()}
        except (TypeError, ValueError):
            logger.exception("Error serializing data for keys %s", ", ".join(items))
            return False

        try:
            with self._session_factory() as db:
                for key, blob in blobs.items():
                    db.merge(StoredItem(key=key, value=blob))
                db.commit()
        except SQLAlchemyError:
            logger.exception("Error saving data for keys %s", ", ".join(items))
            return False

        logger.debug("Saved %s", ", ".join(items))
        return True

    def remove(self, *keys: str) -> bool:
        try:
            with self._session_factory() as db:
                db.execute(delete(StoredItem).where(StoredItem.key.in_(keys)))
                db.commit()
        except SQLAlchemyError:
            logger.exception("Error removing keys %s", ", ".join(keys))
            return False
        return True

    def ping(self):
        with self._session_factory() as db:
            db.execute(select(1))

    def now(self) -> datetime:
        return self._clock()

    def today(self) -> date:
        return self._clock().date()

    def _load(self, key: str, adapter: TypeAdapter, default: Any) -> Any:
        raw = self.get(key)
        if raw is None:
            return default
        try:
            return adapter.validate_python(raw)
        except ValidationError:
            logger.error("Stored data for key %s does not match its schema, using default", key)
            return default

    def _now(self) -> tuple[str, date]:
        now = self._clock()
        stamp = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
        return stamp.replace("+00:00", "Z"), now.date()

    # --------------------------------------------------
    # Chat history
    # --------------------------------------------------
    def get_chat_history(self) -> list[ChatMessage]:
        return self._load(self.keys["chat_history"], _CHAT, [])

    def add_chat_message(self, sender: str, text: str) -> ChatMessage:
        stamp, _ = self._now()
        message = ChatMessage(id=generate_id(), sender=sender, text=text, timestamp=stamp)

        with self._lock:
            history = self.get_chat_history()
            history.append(message)
            self.put(self.keys["chat_history"], _dump_all(history))
        return message

    def clear_chat_history(self) -> bool:
        with self._lock:
            return self.put(self.keys["chat_history"], [])

    # --------------------------------------------------
    # Mood log
    # --------------------------------------------------
    def get_mood_data(self) -> list[MoodEntry]:
        return self._load(self.keys["mood_data"], _MOODS, [])

    def add_mood_entry(self, mood: int, notes: Optional[str] = None) -> MoodEntry:
        stamp, today = self._now()
        entry = MoodEntry(
            id=generate_id(),
            mood=mood,
            notes=notes,
            timestamp=stamp,
            date=today.isoformat(),
        )

        with self._lock:
            moods = self.get_mood_data()
            moods.append(entry)
            self.put(self.keys["mood_data"], _dump_all(moods))
        return entry

    def get_mood_for_date(self, day: str) -> Optional[MoodEntry]:
        return next((e for e in self.get_mood_data() if e.date == day), None)

    # --------------------------------------------------
    # Check-ins + streak
    # --------------------------------------------------
    def get_check_ins(self) -> list[CheckIn]:
        return self._load(self.keys["check_ins"], _CHECK_INS, [])

    def add_check_in(
        self,
        day_rating: int,
        positive_things: Optional[str] = None,
        challenges: Optional[str] = None,
        gratitude: Optional[str] = None,
        tomorrow_focus: Optional[str] = None,
    ) -> CheckIn:
        stamp, today = self._now()
        check_in = CheckIn(
            id=generate_id(),
            day_rating=day_rating,
            positive_things=positive_things,
            challenges=challenges,
            gratitude=gratitude,
            tomorrow_focus=tomorrow_focus,
            timestamp=stamp,
            date=today.isoformat(),
        )

        with self._lock:
            check_ins = self.get_check_ins()
            check_ins.append(check_in)
            streak = analytics.next_streak(self.get_streak(), today)

            # check-in and streak land together or not at all
            self.put_many({
                self.keys["check_ins"]: _dump_all(check_ins),
                self.keys["streak"]: _dump(streak),
            })
        return check_in

    def get_check_in_for_date(self, day: str) -> Optional[CheckIn]:
        return next((c for c in self.get_check_ins() if c.date == day), None)

    def get_streak(self) -> StreakState:
        return self._load(self.keys["streak"], _STREAK, StreakState())

    # --------------------------------------------------
    # Preferences
    # --------------------------------------------------
    def get_preferences(self) -> Preferences:
        return self._load(self.keys["preferences"], _PREFS, Preferences())

    def update_preferences(self, **changes) -> Preferences:
        with self._lock:
            current = self.get_preferences().model_dump()
            current.update({k: v for k, v in changes.items() if v is not None})
            updated = Preferences.model_validate(current)
            self.put(self.keys["preferences"], _dump(updated))
        return updated

    # --------------------------------------------------
    # Export / import
    # --------------------------------------------------
    def export_all(self) -> str:
        stamp, _ = self._now()
        bundle = ExportBundle(
            version=EXPORT_VERSION,
            export_date=stamp,
            chat_history=self.get_chat_history(),
            mood_data=self.get_mood_data(),
            check_ins=self.get_check_ins(),
            preferences=self.get_preferences(),
            streak_data=self.get_streak(),
        )
        return bundle.model_dump_json(by_alias=True, indent=2)

    @staticmethod
    def _parse_bundle(text: str | bytes) -> ExportBundle:
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise BundleValidationError("not valid JSON") from exc

        if not isinstance(data, dict):
            raise BundleValidationError("bundle must be a JSON object")
        if not data.get("version") or not data.get("exportDate"):
            raise BundleValidationError("missing version or exportDate")

        try:
            return ExportBundle.model_validate(data)
        except ValidationError as exc:
            raise BundleValidationError(f"invalid records: {exc.error_count()} error(s)") from exc

    def import_all(self, text: str | bytes) -> bool:
        """Replace every collection present in the bundle. All or nothing."""
        try:
            bundle = self._parse_bundle(text)
        except BundleValidationError as exc:
            logger.warning("Rejected data import: %s", exc)
            return False

        items = {}
        if bundle.chat_history is not None:
            items[self.keys["chat_history"]] = _dump_all(bundle.chat_history)
        if bundle.mood_data is not None:
            items[self.keys["mood_data"]] = _dump_all(bundle.mood_data)
        if bundle.check_ins is not None:
            items[self.keys["check_ins"]] = _dump_all(bundle.check_ins)
        if bundle.preferences is not None:
            items[self.keys["preferences"]] = _dump(bundle.preferences)
        if bundle.streak_data is not None:
            items[self.keys["streak"]] = _dump(bundle.streak_data)

        if not items:
            return True

        with self._lock:
            ok = self.put_many(items)
        if ok:
            logger.info("Imported %s", ", ".join(items))
        return ok

    def clear_all(self):
        with self._lock:
            self.remove(*self.keys.values())
            self.initialize()

    # --------------------------------------------------
    # Dashboard
    # --------------------------------------------------
    def data_summary(self) -> DataSummary:
        return analytics.data_summary(
            self.get_chat_history(),
            self.get_mood_data(),
            self.get_check_ins(),
            self.get_streak(),
        )
