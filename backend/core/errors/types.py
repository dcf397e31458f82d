"""Monadic Error Handling Types

Result/Either types for the lexicon loader, the store and the declension
service. Lookups that can legitimately miss (unknown word, case without a
stem, empty collection) return Err; records that violate the data model
(unknown gender or animacy) raise, because no caller can recover from them.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Error code taxonomy.

    E2xxx: Validation (caller input, malformed lexicon rows)
    E4xxx: Lexicon (lookups 401x, integrity 402x-403x)
    E6xxx: Resource (lexicon files)
    E9xxx: Internal
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2030_UNKNOWN_CASE = 2030
    E2031_UNKNOWN_NUMBER = 2031
    E2032_UNKNOWN_CATEGORY = 2032
    E2033_UNKNOWN_LANGUAGE = 2033

    # Lexicon (E4xxx)
    E4000_LEXICON_GENERIC = 4000
    E4010_LEXEME_NOT_FOUND = 4010
    E4011_CASE_NOT_FOUND = 4011
    E4012_EMPTY_COLLECTION = 4012
    E4020_DUPLICATE_KEY = 4020
    E4030_INVALID_GENDER = 4030
    E4031_INVALID_ANIMACY = 4031
    E4032_FORM_MISSING = 4032

    # Resource (E6xxx)
    E6001_FILE_NOT_FOUND = 6001
    E6002_FILE_READ_ERROR = 6002

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def http_status(self) -> int:
        code = self.value
        if code < 3000:
            return 400
        if 4010 <= code < 4020:
            return 404
        if code == 4020:
            return 409
        return 500

    @property
    def category(self) -> str:
        return {2: "validation", 4: "lexicon", 6: "resource"}.get(self.value // 1000, "internal")

    @property
    def is_fatal(self) -> bool:
        """Integrity failures in the lexicon itself, as opposed to a bad lookup."""
        return 4020 <= self.value < 4100 or self.value >= 9000


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was produced."""
    correlation_id: str = field(default_factory=lambda: uuid4().hex[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """An error code, a message, and the metadata needed to locate the problem.

    Loader errors carry `file` and `line`; lookup errors carry the category
    and word that missed.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def with_context(self, **changes) -> AppError:
        """Copy with some context fields replaced; None values are ignored."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return dataclasses.replace(self, context=dataclasses.replace(self.context, **changes))

    def to_dict(self) -> dict:
        """Serialize error for API responses."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "fatal": self.code.is_fatal,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def map(self, f: Callable[[T], U]) -> Result[U, AppError]:
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Result[U, AppError]]) -> Result[U, AppError]:
        return f(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self  # type: ignore


Result = Union[Ok[T], Err[E]]


def sequence_results(results: list[Result[T, AppError]]) -> Result[list[T], AppError]:
    """First error wins; otherwise all values in order."""
    values: list[T] = []
    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                return Err(e)
    return Ok(values)
