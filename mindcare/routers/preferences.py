from fastapi import APIRouter, Depends

from ..deps import get_store
from ..schemas import Preferences, PreferencesUpdate
from ..services.store import DataStore

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/preferences", response_model=Preferences)
def get_preferences(store: DataStore = Depends(get_store)):
    return store.get_preferences()


@router.patch("/preferences", response_model=Preferences)
def update_preferences(payload: PreferencesUpdate, store: DataStore = Depends(get_store)):
    return store.update_preferences(**payload.model_dump(exclude_unset=True))
