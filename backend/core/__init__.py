"""Configuration, structured logging, errors and HTTP middleware shared by the backend."""
from core.config import Settings, settings, get_settings
from core.logging import (
    configure_logging,
    get_logger,
    api_logger,
    lexicon_logger,
    declension_logger,
)
