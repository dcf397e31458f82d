"""Monadic Error Handling System

Result/AppError types, error builders and the FastAPI handlers that
serialize them.

Usage:
    from core.errors import Ok, Result, AppError, lexeme_not_found

    def find_noun(word: str) -> Result[NounRecord, AppError]:
        record = nouns.get(word)
        if record is None:
            return lexeme_not_found("noun", word, origin="lexicon_store")
        return Ok(record)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    sequence_results,
)

from .builders import (
    # Validation (E2xxx)
    validation_error,
    required_field,
    unknown_value,
    # Lexicon (E4xxx)
    lexeme_not_found,
    case_not_found,
    empty_collection,
    duplicate_key,
    invalid_gender,
    invalid_animacy,
    form_missing,
    # Resource (E6xxx)
    file_not_found,
    file_read_error,
)

from .handlers import (
    AppErrorException,
    register_error_handlers,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "sequence_results",
    "validation_error",
    "required_field",
    "unknown_value",
    "lexeme_not_found",
    "case_not_found",
    "empty_collection",
    "duplicate_key",
    "invalid_gender",
    "invalid_animacy",
    "form_missing",
    "file_not_found",
    "file_read_error",
    "AppErrorException",
    "register_error_handlers",
    "raise_result",
]
