import os

from pydantic import BaseModel, ConfigDict

TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    require_user: bool = False
    frontend_url: str = "http://localhost:3000"
    port: int = 8000
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment once at start-up."""
    return Settings(
        require_user=os.getenv("BOOKING_REQUIRE_USER", "false").strip().lower() in TRUTHY,
        frontend_url=os.getenv("FRONTEND_URL", "http://localhost:3000"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
