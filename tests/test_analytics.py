"""
Tests for mood analytics and streak transitions.
"""
from datetime import date, datetime, timezone

import pytest

from mindcare.schemas import ChatMessage, MoodEntry, StreakState
from mindcare.services import analytics
from mindcare.services.timeline import format_date, format_time, human_delta


def _moods(*values, notes=None):
    return [
        MoodEntry(
            id=f"m{i}",
            mood=v,
            notes=(notes or {}).get(i),
            timestamp="2026-10-01T12:00:00.000Z",
            date=f"2026-10-{i + 1:02d}",
        )
        for i, v in enumerate(values)
    ]


def test_stats_empty():
    stats = analytics.mood_stats([])
    assert stats.average == 0
    assert stats.total_days == 0
    assert stats.recent_trend == "stable"


def test_stats_basic_and_half_up_rounding():
    stats = analytics.mood_stats(_moods(3, 3, 4, 3))

    assert stats.average == 3.3
    assert stats.best == 4
    assert stats.worst == 3
    assert stats.total_days == 4


def test_two_entries_are_stable():
    assert analytics.mood_stats(_moods(1, 5)).recent_trend == "stable"


def test_improving_when_recent_week_beats_previous():
    # previous window: three 3s, recent window: seven 4s
    stats = analytics.mood_stats(_moods(3, 3, 3, 4, 4, 4, 4, 4, 4, 4))
    assert stats.recent_trend == "improving"


def test_declining_when_recent_week_drops():
    stats = analytics.mood_stats(_moods(4, 4, 4, 3, 3, 3, 3, 3, 3, 3))
    assert stats.recent_trend == "declining"


def test_half_point_difference_is_stable():
    stats = analytics.mood_stats(_moods(3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4))
    assert stats.recent_trend == "stable"


def test_strict_trend_needs_two_full_weeks():
    assert analytics.mood_trend(_moods(3, 3, 3, 4, 4, 4, 4, 4, 4, 4)) == "insufficient_data"
    assert analytics.mood_trend(_moods(*([2] * 7 + [4] * 7))) == "improving"
    assert analytics.mood_trend(_moods(*([4] * 7 + [2] * 7))) == "declining"
    assert analytics.mood_trend(_moods(*([3] * 14))) == "stable"


def test_variance_is_population_stddev():
    assert analytics.mood_variance([]) == 0.0
    assert analytics.mood_variance(_moods(1, 5)) == pytest.approx(2.0)


def test_insights_need_a_week_of_data():
    assert analytics.mood_insights(_moods(3, 3, 3)) is None


def test_insights_consistency_and_best_day():
    entries = _moods(3, 4, 3, 3, 4, 3, 3, notes={1: "beach day", 4: "later good day"})
    insights = analytics.mood_insights(entries)

    assert len(insights) == 2
    assert "consistent" in insights[0]
    assert '"beach day"' in insights[1]


def test_insights_mention_improvement():
    entries = _moods(1, 1, 1, 5, 5, 5, 5, 5, 5, 5)
    insights = analytics.mood_insights(entries)
    assert insights[0].startswith("Your mood has been improving")


def test_last_30_days():
    entries = _moods(2, 4)
    points = analytics.last_30_days(entries, date(2026, 10, 20))

    assert len(points) == 30
    assert points[0].date == "2026-09-21"
    assert points[-1].date == "2026-10-20"
    by_day = {p.date: p.mood for p in points}
    assert by_day["2026-10-01"] == 2
    assert by_day["2026-10-02"] == 4
    assert by_day["2026-10-03"] is None


# --------------------------------------------------
# Streak transitions
# --------------------------------------------------
TODAY = date(2026, 10, 19)


def test_streak_first_check_in():
    s = analytics.next_streak(StreakState(), TODAY)
    assert s == StreakState(current_streak=1, longest_streak=1, last_check_in="2026-10-19")


def test_streak_same_day_unchanged():
    state = StreakState(current_streak=4, longest_streak=6, last_check_in="2026-10-19")
    assert analytics.next_streak(state, TODAY) == state


def test_streak_continues_from_yesterday():
    state = StreakState(current_streak=4, longest_streak=4, last_check_in="2026-10-18")
    s = analytics.next_streak(state, TODAY)
    assert s.current_streak == 5
    assert s.longest_streak == 5


def test_streak_resets_after_gap():
    state = StreakState(current_streak=4, longest_streak=6, last_check_in="2026-10-15")
    s = analytics.next_streak(state, TODAY)
    assert s.current_streak == 1
    assert s.longest_streak == 6
    assert s.last_check_in == "2026-10-19"


def test_streak_zero_current_restarts_at_one():
    state = StreakState(current_streak=0, longest_streak=3, last_check_in="2026-10-18")
    assert analytics.next_streak(state, TODAY).current_streak == 1


# --------------------------------------------------
# Dashboard
# --------------------------------------------------
def test_data_summary_last_activity():
    chat = [ChatMessage(id="c1", sender="user", text="hi", timestamp="2026-10-19T12:00:00.000Z")]
    summary = analytics.data_summary(chat, [], [], StreakState())

    assert summary.total_messages == 1
    assert summary.average_mood == 0
    assert summary.last_activity == "Oct 19, 2026"


def test_data_summary_empty():
    summary = analytics.data_summary([], [], [], StreakState())
    assert summary.last_activity is None


def test_human_delta():
    ts = "2026-10-19T12:00:00Z"
    noon = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    assert human_delta(ts, noon.replace(minute=30)) == "Just now"
    assert human_delta(ts, noon.replace(hour=15)) == "3h ago"
    assert human_delta(ts, noon.replace(day=21)) == "10/19/2026"


def test_format_helpers_use_local_time():
    local = datetime(2026, 10, 19, 15, 45).astimezone()
    ts = local.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")

    assert format_time(ts) == "03:45 PM"
    assert format_date(ts) == "Oct 19, 2026"
