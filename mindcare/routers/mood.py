from fastapi import APIRouter, Depends, HTTPException
from typing import List

from ..deps import get_responder, get_store
from ..schemas import (
    ChartPoint,
    MoodEntry,
    MoodInsightsOut,
    MoodLogIn,
    MoodLogOut,
    MoodStats,
    MoodTrendOut,
)
from ..services import analytics
from ..services.responder import ResponseEngine
from ..services.store import DataStore

router = APIRouter(prefix="/mood", tags=["mood"])


@router.post("/log", response_model=MoodLogOut)
def log_mood(
    payload: MoodLogIn,
    store: DataStore = Depends(get_store),
    responder: ResponseEngine = Depends(get_responder),
):
    entry = store.add_mood_entry(payload.mood, payload.notes or None)

    # The chat log gets a bot line reacting to the rating
    encouragement = store.add_chat_message("bot", responder.mood_encouragement(payload.mood))

    return MoodLogOut(entry=entry, encouragement=encouragement)


@router.get("/history", response_model=List[MoodEntry])
def mood_history(store: DataStore = Depends(get_store)):
    return store.get_mood_data()


@router.get("/stats", response_model=MoodStats)
def mood_stats(store: DataStore = Depends(get_store)):
    return analytics.mood_stats(store.get_mood_data())


@router.get("/trend", response_model=MoodTrendOut)
def mood_trend(store: DataStore = Depends(get_store)):
    return MoodTrendOut(trend=analytics.mood_trend(store.get_mood_data()))


@router.get("/chart", response_model=List[ChartPoint])
def mood_chart(store: DataStore = Depends(get_store)):
    return analytics.last_30_days(store.get_mood_data(), store.today())


@router.get("/insights", response_model=MoodInsightsOut)
def mood_insights(store: DataStore = Depends(get_store)):
    return MoodInsightsOut(insights=analytics.mood_insights(store.get_mood_data()))


@router.get("/day/{day}", response_model=MoodEntry)
def mood_for_day(day: str, store: DataStore = Depends(get_store)):
    entry = store.get_mood_for_date(day)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"No mood logged on {day}")
    return entry
