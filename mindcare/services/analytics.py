"""
Mood statistics, trend classification, streak transitions and dashboard
summaries.

Everything here is a pure function of the collections passed in. Nothing is
cached; callers recompute from the store on every request.
"""
import math
from datetime import date, timedelta
from typing import Sequence

import numpy as np

from ..schemas import (
    ChatMessage,
    ChartPoint,
    CheckIn,
    DataSummary,
    MoodEntry,
    MoodStats,
    StreakState,
)
from .timeline import format_date, parse_timestamp

TREND_WINDOW = 7
TREND_THRESHOLD = 0.5

# Minimum samples per window
STATS_MIN_SAMPLES = 3
TREND_MIN_SAMPLES = 7

CONSISTENT_STDDEV = 1.0
CHART_DAYS = 30


def _round1(x: float) -> float:
    # half-up, so 3.25 -> 3.3 (Python's round() would give 3.2)
    return math.floor(x * 10 + 0.5) / 10


def compare_windows(moods: Sequence[int], min_samples: int) -> str | None:
    """
    Compare the mean of the last 7 values against the mean of the 7 before.

    Windows are taken by insertion order, not by calendar day. Returns None
    when either window holds fewer than ``min_samples`` values.
    """
    recent = list(moods[-TREND_WINDOW:])
    previous = list(moods[-2 * TREND_WINDOW:-TREND_WINDOW])

    if len(recent) < min_samples or len(previous) < min_samples:
        return None

    diff = float(np.mean(recent)) - float(np.mean(previous))
    if diff > TREND_THRESHOLD:
        return "improving"
    if diff < -TREND_THRESHOLD:
        return "declining"
    return "stable"


def mood_stats(entries: Sequence[MoodEntry]) -> MoodStats:
    if not entries:
        return MoodStats()

    moods = np.array([e.mood for e in entries])

    return MoodStats(
        average=_round1(float(moods.mean())),
        best=int(moods.max()),
        worst=int(moods.min()),
        total_days=len(entries),
        recent_trend=compare_windows(moods.tolist(), STATS_MIN_SAMPLES) or "stable",
    )


def mood_trend(entries: Sequence[MoodEntry]) -> str:
    """Strict variant of the stats trend: needs two full weeks of entries."""
    return compare_windows([e.mood for e in entries], TREND_MIN_SAMPLES) or "insufficient_data"


def mood_variance(entries: Sequence[MoodEntry]) -> float:
    # population standard deviation, despite the name
    if not entries:
        return 0.0
    return float(np.std([e.mood for e in entries]))


def mood_insights(entries: Sequence[MoodEntry]) -> list[str] | None:
    if len(entries) < TREND_WINDOW:
        return None

    insights = []
    stats = mood_stats(entries)

    if stats.recent_trend == "improving":
        insights.append("Your mood has been improving recently! Keep up the great work.")
    elif stats.recent_trend == "declining":
        insights.append(
            "I notice your mood has been lower lately. Remember that it's okay to reach out for support."
        )

    if mood_variance(entries) < CONSISTENT_STDDEV:
        insights.append(
            "Your mood has been quite consistent. This stability can be a good foundation for growth."
        )

    # max() keeps the first of equal moods
    best_day = max(entries, key=lambda e: e.mood)
    if best_day.notes:
        insights.append(
            f'Your best day was when you noted: "{best_day.notes}". What made that day special?'
        )

    return insights


def last_30_days(entries: Sequence[MoodEntry], today: date) -> list[ChartPoint]:
    by_date: dict[str, MoodEntry] = {}
    for e in entries:
        by_date.setdefault(e.date, e)

    points = []
    for offset in range(CHART_DAYS - 1, -1, -1):
        day = (today - timedelta(days=offset)).isoformat()
        entry = by_date.get(day)
        points.append(ChartPoint(
            date=day,
            mood=entry.mood if entry else None,
            notes=entry.notes if entry else None,
        ))
    return points


def next_streak(state: StreakState, today: date) -> StreakState:
    today_s = today.isoformat()
    yesterday_s = (today - timedelta(days=1)).isoformat()

    if state.last_check_in == today_s:
        # already checked in today
        return state

    if state.current_streak == 0:
        current = 1  # first check-in
    elif state.last_check_in == yesterday_s:
        current = state.current_streak + 1
    else:
        current = 1  # streak broken

    return StreakState(
        current_streak=current,
        longest_streak=max(state.longest_streak, current),
        last_check_in=today_s,
    )


def last_activity(
    chat: Sequence[ChatMessage],
    moods: Sequence[MoodEntry],
    check_ins: Sequence[CheckIn],
) -> str | None:
    stamps = [r.timestamp for r in (*chat, *moods, *check_ins)]
    if not stamps:
        return None
    latest = max(stamps, key=parse_timestamp)
    return format_date(latest)


def data_summary(
    chat: Sequence[ChatMessage],
    moods: Sequence[MoodEntry],
    check_ins: Sequence[CheckIn],
    streak: StreakState,
) -> DataSummary:
    stats = mood_stats(moods)
    return DataSummary(
        total_messages=len(chat),
        total_mood_entries=len(moods),
        total_check_ins=len(check_ins),
        current_streak=streak.current_streak,
        longest_streak=streak.longest_streak,
        average_mood=stats.average,
        recent_trend=stats.recent_trend,
        last_activity=last_activity(chat, moods, check_ins),
    )
