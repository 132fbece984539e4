import secrets
from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    name: str = Field(default="flashcards", alias="APP_NAME")
    version: str = Field(default="v1", alias="API_VERSION")
    port: int = Field(default=9000, alias="APP_PORT")
    mode: str = Field(default="prod", alias="MODE")
    # Random per process unless pinned, so sessions end with the process.
    session_secret: str = Field(
        default_factory=lambda: secrets.token_hex(32), alias="SESSION_SECRET"
    )

    @computed_field
    def is_production(self) -> bool:
        return self.mode != "dev"


class FlashcardSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    model_name: str = Field(default="gemini-2.5-flash", alias="FLASHCARDS_MODEL")
    session_key: str = Field(default="GEMINI_API_KEY", alias="FLASHCARDS_SESSION_KEY")
    invalid_key_marker: str = Field(
        default="API key not valid", alias="FLASHCARDS_INVALID_KEY_MARKER"
    )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=lambda: AppSettings())
    flashcards: FlashcardSettings = Field(default_factory=lambda: FlashcardSettings())

    # Only used by the CLI; the web app takes the key from the browser session.
    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")


settings = Settings()
