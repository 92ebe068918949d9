from pydantic import BaseModel
import os
from dotenv import load_dotenv

# Load .env variables
load_dotenv()


class Settings(BaseModel):
    # ===============================
    # Core environment
    # ===============================
    env: str = os.getenv("ENV", "dev")

    # ===============================
    # Local storage
    # ===============================
    database_url: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./mindcare.db"
    )

    # Every stored blob lives under "<prefix><name>"
    storage_prefix: str = os.getenv("STORAGE_PREFIX", "mindcare_")

    # ===============================
    # Chat
    # ===============================
    # en | hi | mr | kn
    default_language: str = os.getenv("DEFAULT_LANGUAGE", "en")

    # Simulated typing delay handed to the client (seconds)
    typing_delay_min: float = float(os.getenv("TYPING_DELAY_MIN", "1.0"))
    typing_delay_max: float = float(os.getenv("TYPING_DELAY_MAX", "3.0"))

    # ===============================
    # Logging
    # ===============================
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str | None = os.getenv("LOG_FILE")


# Singleton settings object
settings = Settings()
