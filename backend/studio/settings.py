from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field

BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
	host: str = Field(default="0.0.0.0", validation_alias="HOST")
	port: int = Field(default=3000, validation_alias="PORT")

	# Missing key is reported per request, never at startup
	openai_api_key: str | None = Field(default=None, validation_alias="OPENAI_API_KEY")
	openai_base_url: str = Field(default="https://api.openai.com/v1/chat/completions", validation_alias="OPENAI_BASE_URL")
	# Generous; completions regularly run past a minute. No retries either way
	openai_timeout_seconds: float | None = Field(default=300.0, validation_alias="OPENAI_TIMEOUT_SECONDS")

	# Prebuilt single-page app (entry document is index.html)
	static_dir: Path = Field(default=BASE_DIR / "frontend" / "dist", validation_alias="STATIC_DIR")

	# Client-side cosmetic unlock; bundled into the client, not a secret
	admin_code: str = Field(default="CURRICULUM2026", validation_alias=AliasChoices("ADMIN_CODE", "VITE_ADMIN_CODE"))
	server_url: str = Field(default="http://localhost:3000", validation_alias="STUDIO_SERVER_URL")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()


def get_settings() -> Settings:
	return settings
