"""Application configuration via pydantic-settings."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Identity provider (optional; dev mode accepts the token as the user id)
    identity_api_url: str = ""

    # Payment provider (optional; mock checkout sessions without a key)
    payment_secret_key: str = ""
    payment_api_url: str = "https://api.stripe.com"
    currency: str = "usd"

    # Storefront
    site_url: str = "http://localhost:5173"
    book_price: float = 29.99
    shipping_amount: float = 5.00

    # Persistence
    draft_save_retries: int = 2

    # Data directory
    data_dir: Path = Path("./data")

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @property
    def db_path(self) -> Path:
        return self.data_dir / "littleorigins.db"

    def ensure_data_dir(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
