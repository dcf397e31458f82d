"""Domain-Specific Error Builders

Ergonomic constructors for typed lexicon errors.
Each builder creates an AppError with the appropriate code and context.
"""
from pathlib import Path

from .types import AppError, ErrorCode, ErrorContext, Err


def _err(code: ErrorCode, message: str, origin: str, cause: Exception | None = None, **metadata) -> Err[AppError]:
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
        cause=cause,
    ))


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    return _err(code, message, origin, field=field, value=value, **metadata)


def required_field(field: str, origin: str = "", **metadata) -> Err[AppError]:
    return validation_error(
        f"Required field '{field}' is missing",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
        origin=origin,
        **metadata,
    )


def unknown_value(kind: str, value: str, allowed: list[str], code: ErrorCode, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Unknown {kind} '{value}'. Expected one of: {', '.join(allowed)}",
        code=code,
        field=kind,
        value=value,
        allowed=allowed,
        origin=origin,
    )


# =============================================================================
# Lexicon Errors (E4xxx)
# =============================================================================

def lexeme_not_found(category: str, word: str, origin: str = "") -> Err[AppError]:
    return _err(
        ErrorCode.E4010_LEXEME_NOT_FOUND,
        f"Couldn't find {category} '{word}' in the lexicon",
        origin,
        category=category,
        word=word,
    )


def case_not_found(case: str, origin: str = "") -> Err[AppError]:
    return _err(
        ErrorCode.E4011_CASE_NOT_FOUND,
        f"Could not find case '{case}' in the sentence stem data",
        origin,
        case=case,
    )


def empty_collection(category: str, origin: str = "") -> Err[AppError]:
    return _err(
        ErrorCode.E4012_EMPTY_COLLECTION,
        f"No {category} records loaded",
        origin,
        category=category,
    )


def duplicate_key(collection: str, key: str, origin: str = "") -> Err[AppError]:
    return _err(
        ErrorCode.E4020_DUPLICATE_KEY,
        f"Duplicate key '{key}' in {collection} collection",
        origin,
        collection=collection,
        key=key,
    )


def invalid_gender(word: str, gender: object, origin: str = "", **metadata) -> Err[AppError]:
    return _err(
        ErrorCode.E4030_INVALID_GENDER,
        f"I don't know how to decline '{word}' (gender: {gender})",
        origin,
        word=word,
        gender=str(gender),
        **metadata,
    )


def invalid_animacy(word: str, animacy: object, origin: str = "", **metadata) -> Err[AppError]:
    return _err(
        ErrorCode.E4031_INVALID_ANIMACY,
        f"I don't know how to decline '{word}' (animacy: {animacy})",
        origin,
        word=word,
        animacy=str(animacy),
        **metadata,
    )


def form_missing(word: str, field: str, origin: str = "") -> Err[AppError]:
    return _err(
        ErrorCode.E4032_FORM_MISSING,
        f"No stored form '{field}' for '{word}'",
        origin,
        word=word,
        field=field,
    )


# =============================================================================
# Resource Errors (E6xxx)
# =============================================================================

def file_not_found(path: Path | str, origin: str = "") -> Err[AppError]:
    return _err(
        ErrorCode.E6001_FILE_NOT_FOUND,
        f"Lexicon file not found: {path}",
        origin,
        path=str(path),
    )


def file_read_error(path: Path | str, cause: Exception, origin: str = "") -> Err[AppError]:
    return _err(
        ErrorCode.E6002_FILE_READ_ERROR,
        f"Could not read lexicon file {path}: {cause}",
        origin,
        cause=cause,
        path=str(path),
    )

