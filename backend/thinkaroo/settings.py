from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
	# Listener address; 0.0.0.0 accepts connections on every interface
	host: str = Field(default="0.0.0.0", validation_alias="HOST")
	port: int = Field(default=8080, ge=0, le=65535, validation_alias="PORT")

	# Root log level: debug, info, warning, error
	log_level: str = Field(default="info", validation_alias="LOG_LEVEL")

	# Landing pages served at /, /home and /reading
	static_dir: Path = Field(default=BASE_DIR / "static", validation_alias="STATIC_DIR")
	# *.toml prompt configurations reported at startup
	prompts_dir: Path = Field(default=BASE_DIR / "prompts", validation_alias="PROMPTS_DIR")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
	# Read on first use so a bad environment is reported by the caller, not at import
	return Settings()
