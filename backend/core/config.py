from functools import lru_cache
from importlib.resources import files
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Bundled lexicon, shipped as package data of languages.russian
DATA_DIR = Path(str(files("languages") / "russian" / "lexicon"))


class Settings(BaseSettings):
    """Environment-driven settings; a `.env` file in the working directory is read too."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Lexicon files, resolved against LEXICON_DIR
    LEXICON_DIR: Path = DATA_DIR
    NOUNS_FILE: str = "nouns.csv"
    ADJECTIVES_FILE: str = "adjectives.csv"
    PRONOUNS_FILE: str = "pronouns.csv"
    STEMS_FILE: str = "sentence_stems.csv"

    # Seed for random lexeme picks; unset means nondeterministic
    RANDOM_SEED: int | None = None

    # Backend
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {value!r}")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
