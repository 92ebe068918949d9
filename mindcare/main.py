import logging

from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .settings import Settings, settings
from .db import Base, engine, SessionLocal
from .deps import get_store
from .log import setup_logging
from .services.responder import ResponseEngine
from .services.store import DataStore

from .routers import chatbot as chatbot_router
from .routers import mood as mood_router
from .routers import checkins as checkins_router
from .routers import preferences as preferences_router
from .routers import data as data_router

logger = logging.getLogger(__name__)


# --------------------------------------------------
# CORS (Vite dev)
# --------------------------------------------------
ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def create_app(
    config: Settings = settings,
    store: DataStore | None = None,
    responder: ResponseEngine | None = None,
) -> FastAPI:
    setup_logging(config.log_level, config.log_file)

    # --------------------------------------------------
    # Collaborators
    # --------------------------------------------------
    if store is None:
        Base.metadata.create_all(bind=engine)
        store = DataStore(SessionLocal, prefix=config.storage_prefix)
    if responder is None:
        responder = ResponseEngine(language=config.default_language)

    app = FastAPI(title="MindCare Backend", version=__version__)
    app.state.settings = config
    app.state.store = store
    app.state.responder = responder

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=False,  # no cookies/auth headers
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --------------------------------------------------
    # Routers
    # --------------------------------------------------
    app.include_router(chatbot_router.router)
    app.include_router(mood_router.router)
    app.include_router(checkins_router.router)
    app.include_router(preferences_router.router)
    app.include_router(data_router.router)

    # --------------------------------------------------
    # Health
    # --------------------------------------------------
    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/health/db")
    def health_db(store: DataStore = Depends(get_store)):
        try:
            store.ping()
        except SQLAlchemyError:
            logger.exception("Database health check failed")
            raise HTTPException(status_code=503, detail="database unavailable")
        return {"status": "ok", "db": "connected"}

    # --------------------------------------------------
    # Root
    # --------------------------------------------------
    @app.get("/")
    def root():
        return {"status": "ok", "service": "mindcare-backend"}

    logger.info("MindCare backend ready (env=%s, language=%s)", config.env, responder.current_language)
    return app

