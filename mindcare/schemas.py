from pydantic import AfterValidator, BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, Any, Dict, List, Literal, Union, Annotated

from .services.timeline import parse_day, parse_timestamp


class CamelModel(BaseModel):
    """Serialized with camelCase keys, the format of stored blobs and export bundles."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# Mood and day ratings: whole numbers 1..5, no coercion from strings or floats
Rating = Annotated[int, Field(strict=True, ge=1, le=5)]

Trend = Literal["improving", "declining", "stable"]


def _instant(v: str) -> str:
    parse_timestamp(v)
    return v


def _day(v: str) -> str:
    parse_day(v)
    return v


# ISO-8601 instant, e.g. "2026-10-19T09:30:00.000Z"
Instant = Annotated[str, AfterValidator(_instant)]

# Local calendar day, "YYYY-MM-DD"
Day = Annotated[str, AfterValidator(_day)]


# --------------------------------------------------
# Stored entities
# --------------------------------------------------
class ChatMessage(CamelModel):
    id: str
    sender: Literal["user", "bot"]
    text: str
    timestamp: Instant


class MoodEntry(CamelModel):
    id: str
    mood: Rating
    notes: Optional[str] = None
    timestamp: Instant
    date: Day


class CheckIn(CamelModel):
    id: str
    day_rating: Rating
    positive_things: Optional[str] = None
    challenges: Optional[str] = None
    gratitude: Optional[str] = None
    tomorrow_focus: Optional[str] = None
    timestamp: Instant
    date: Day


class StreakState(CamelModel):
    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)
    last_check_in: Optional[Day] = None


class Preferences(CamelModel):
    daily_reminders: bool = True
    mood_reminders: bool = True
    theme: Literal["light", "dark"] = "light"
    notifications: bool = True


class ExportBundle(CamelModel):
    # Presence is checked by the store; any truthy value is accepted
    version: Any = None
    export_date: Any = None

    chat_history: Optional[List[ChatMessage]] = None
    mood_data: Optional[List[MoodEntry]] = None
    check_ins: Optional[List[CheckIn]] = None
    preferences: Optional[Preferences] = None
    streak_data: Optional[StreakState] = None


# --------------------------------------------------
# Replies (tagged by "type")
# --------------------------------------------------
class BreathingExercise(CamelModel):
    name: str
    instruction: str
    duration: str


class MindfulnessTechnique(CamelModel):
    name: str
    instruction: str


class CBTTechnique(CamelModel):
    name: str
    description: Optional[str] = None
    steps: Optional[List[str]] = None
    suggestions: Optional[List[str]] = None
    techniques: Optional[List[str]] = None


class CrisisReply(CamelModel):
    type: Literal["crisis"] = "crisis"
    text: str
    urgent: Literal[True] = True


class TechniqueReply(CamelModel):
    type: Literal[
        "anxiety_support",
        "depression_support",
        "stress_support",
        "sleep_support",
        "cbt_technique",
        "mindfulness_practice",
    ]
    text: str
    # informational tags only, e.g. "breathing", "grounding"
    techniques: List[str]


class ExerciseReply(CamelModel):
    type: Literal["breathing_exercise"] = "breathing_exercise"
    text: str
    exercise: BreathingExercise


class TextReply(CamelModel):
    type: Literal[
        "greeting",
        "mood_response",
        "relationship_support",
        "self_care_support",
        "gratitude_practice",
        "coping_strategies",
        "progress_celebration",
        "resources_info",
        "general_support",
    ]
    text: str


Reply = Annotated[
    Union[CrisisReply, TechniqueReply, ExerciseReply, TextReply],
    Field(discriminator="type"),
]


# --------------------------------------------------
# Chat
# --------------------------------------------------
class ChatIn(CamelModel):
    message: str

    @field_validator("message")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("message must not be empty")
        return v


class ChatOut(CamelModel):
    reply: Reply
    user_message: ChatMessage
    bot_message: ChatMessage
    # seconds the client waits before revealing the reply
    typing_delay: float


class ChatHistoryItem(ChatMessage):
    # "Just now", "3h ago" or a plain date
    display_time: str
    # "03:45 PM"
    clock_time: str


class LanguageIn(CamelModel):
    language: str


class TranslationOut(CamelModel):
    key: str
    language: str
    value: Union[str, List[str], Dict[str, str]]


# --------------------------------------------------
# Mood
# --------------------------------------------------
class MoodLogIn(CamelModel):
    mood: Rating
    notes: Optional[str] = None


class MoodLogOut(CamelModel):
    entry: MoodEntry
    encouragement: ChatMessage


class MoodStats(CamelModel):
    average: float = 0
    best: int = 0
    worst: int = 0
    total_days: int = 0
    recent_trend: Trend = "stable"


class MoodTrendOut(CamelModel):
    trend: Literal["improving", "declining", "stable", "insufficient_data"]


class ChartPoint(CamelModel):
    date: str
    mood: Optional[int] = None
    notes: Optional[str] = None


class MoodInsightsOut(CamelModel):
    insights: Optional[List[str]] = None


# --------------------------------------------------
# Check-ins
# --------------------------------------------------
class CheckInIn(CamelModel):
    day_rating: Rating
    positive_things: Optional[str] = None
    challenges: Optional[str] = None
    gratitude: Optional[str] = None
    tomorrow_focus: Optional[str] = None


class CheckInOut(CamelModel):
    check_in: CheckIn
    streak: StreakState


# --------------------------------------------------
# Settings / data
# --------------------------------------------------
class PreferencesUpdate(CamelModel):
    daily_reminders: Optional[bool] = None
    mood_reminders: Optional[bool] = None
    theme: Optional[Literal["light", "dark"]] = None
    notifications: Optional[bool] = None


class DataSummary(CamelModel):
    total_messages: int
    total_mood_entries: int
    total_check_ins: int
    current_streak: int
    longest_streak: int
    average_mood: float
    recent_trend: Trend
    last_activity: Optional[str] = None


class ImportResult(CamelModel):
    success: bool
