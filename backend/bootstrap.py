"""Composition root: settings -> loader -> store -> service."""
from core.config import Settings
from core.errors import AppError, Result
from core.logging import lexicon_logger
from ingest.lexicon import LexiconFiles, load_lexicon
from languages.base import RandomIndex, SeededRandomIndex
from languages.russian import DeclensionService, LexiconStore

log = lexicon_logger()


def build_service(settings: Settings, rng: RandomIndex | None = None) -> Result[DeclensionService, AppError]:
    """Load the configured lexicon once and wrap it in a DeclensionService."""
    files = LexiconFiles.from_settings(settings)
    log.debug("lexicon_files", directory=str(settings.LEXICON_DIR), seed=settings.RANDOM_SEED)
    return (
        load_lexicon(files)
        .and_then(LexiconStore.build)
        .map(lambda store: DeclensionService(store, rng or SeededRandomIndex(settings.RANDOM_SEED)))
    )
