"""Pizza Bot — configuration loaded from environment."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, loaded from .env or environment variables."""

    # ── WhatsApp Business API ─────────────────────────────
    whatsapp_verify_token: str = "changeme"
    whatsapp_api_token: str = ""
    whatsapp_phone_number_id: str = ""
    whatsapp_api_version: str = "v21.0"

    # ── Sessions ──────────────────────────────────────────
    session_max_age_seconds: int = 2 * 60 * 60
    session_sweep_interval_seconds: int = 30 * 60

    # ── App ───────────────────────────────────────────────
    app_name: str = "Tony's Pizza Bot"
    debug: bool = True
    host: str = "0.0.0.0"
    port: int = 3000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton settings instance
settings = Settings()
