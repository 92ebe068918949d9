import logging
import random
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_responder, get_settings, get_store
from ..schemas import (
    BreathingExercise,
    CBTTechnique,
    ChatHistoryItem,
    ChatIn,
    ChatMessage,
    ChatOut,
    LanguageIn,
    MindfulnessTechnique,
    TranslationOut,
)
from ..services.responder import ResponseEngine
from ..services.store import DataStore
from ..services.timeline import format_time, human_delta
from ..settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/text", response_model=ChatOut)
def chat_text(
    payload: ChatIn,
    store: DataStore = Depends(get_store),
    responder: ResponseEngine = Depends(get_responder),
    config: Settings = Depends(get_settings),
):
    # Both lines are archived before the client starts its typing animation
    user_message = store.add_chat_message("user", payload.message)

    reply = responder.generate_response(payload.message)
    bot_message = store.add_chat_message("bot", reply.text)

    delay = random.uniform(config.typing_delay_min, config.typing_delay_max)

    return ChatOut(
        reply=reply,
        user_message=user_message,
        bot_message=bot_message,
        typing_delay=round(delay, 2),
    )


@router.post("/new", response_model=List[ChatMessage])
def new_chat(
    store: DataStore = Depends(get_store),
    responder: ResponseEngine = Depends(get_responder),
):
    store.clear_chat_history()
    store.add_chat_message("bot", responder.welcome_message())
    logger.info("Started a new chat")
    return store.get_chat_history()


@router.get("/history", response_model=List[ChatHistoryItem])
def chat_history(store: DataStore = Depends(get_store)):
    now = store.now()
    return [
        ChatHistoryItem(
            **m.model_dump(),
            display_time=human_delta(m.timestamp, now),
            clock_time=format_time(m.timestamp),
        )
        for m in store.get_chat_history()
    ]


# --------------------------------------------------
# Language
# --------------------------------------------------
@router.put("/language")
def set_language(payload: LanguageIn, responder: ResponseEngine = Depends(get_responder)):
    responder.set_language(payload.language)
    return {"language": responder.current_language}


@router.get("/translation/{key}", response_model=TranslationOut)
def translation(key: str, responder: ResponseEngine = Depends(get_responder)):
    return TranslationOut(
        key=key,
        language=responder.current_language,
        value=responder.get_translation(key),
    )


# --------------------------------------------------
# Technique library
# --------------------------------------------------
@router.get("/techniques/cbt/{name}", response_model=CBTTechnique)
def cbt_technique(name: str, responder: ResponseEngine = Depends(get_responder)):
    technique = responder.get_cbt_technique(name)
    if technique is None:
        raise HTTPException(status_code=404, detail=f"Unknown CBT technique '{name}'")
    return technique


@router.get("/techniques/breathing", response_model=BreathingExercise)
def breathing_exercise(responder: ResponseEngine = Depends(get_responder)):
    return responder.random_breathing_exercise()


@router.get("/techniques/mindfulness", response_model=MindfulnessTechnique)
def mindfulness_technique(responder: ResponseEngine = Depends(get_responder)):
    return responder.random_mindfulness_technique()


@router.get("/resources/crisis")
def crisis_resources(responder: ResponseEngine = Depends(get_responder)):
    return responder.crisis_resources()
