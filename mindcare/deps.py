from fastapi import Request

from .services.responder import ResponseEngine
from .services.store import DataStore
from .settings import Settings


# Collaborators are built once in create_app() and parked on app.state
def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_responder(request: Request) -> ResponseEngine:
    return request.app.state.responder


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
