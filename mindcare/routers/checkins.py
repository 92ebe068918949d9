from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List

from ..deps import get_store
from ..schemas import CheckIn, CheckInIn, CheckInOut, StreakState
from ..services.store import DataStore

router = APIRouter(prefix="/checkins", tags=["checkins"])


@router.post("", response_model=CheckInOut)
def create_check_in(payload: CheckInIn, store: DataStore = Depends(get_store)):
    check_in = store.add_check_in(
        day_rating=payload.day_rating,
        positive_things=payload.positive_things or None,
        challenges=payload.challenges or None,
        gratitude=payload.gratitude or None,
        tomorrow_focus=payload.tomorrow_focus or None,
    )
    return CheckInOut(check_in=check_in, streak=store.get_streak())


@router.get("", response_model=List[CheckIn])
def recent_check_ins(
    limit: int = Query(5, ge=1, le=365),
    store: DataStore = Depends(get_store),
):
    # newest first
    return list(reversed(store.get_check_ins()))[:limit]


@router.get("/streak", response_model=StreakState)
def streak(store: DataStore = Depends(get_store)):
    return store.get_streak()


@router.get("/day/{day}", response_model=CheckIn)
def check_in_for_day(day: str, store: DataStore = Depends(get_store)):
    check_in = store.get_check_in_for_date(day)
    if check_in is None:
        raise HTTPException(status_code=404, detail=f"No check-in on {day}")
    return check_in
