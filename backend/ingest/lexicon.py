"""Lexicon CSV Loader

Reads the four lexicon files into record sets:
- nouns.csv: nom, gen, acc, dat, inst, prep, nmp, gnp, dtp, itp, prp, gender, animate [, acp]
- adjectives.csv / pronouns.csv: masc_nom ... pl_prep (one column per form field)
- sentence_stems.csv: case, rus, eng

Files are UTF-8 with a header row. Extra columns are ignored.
"""
import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, TypeVar

from core.config import Settings
from core.errors import AppError, Err, Ok, Result, file_not_found, file_read_error, required_field, sequence_results
from core.logging import lexicon_logger
from languages.russian.maps import (
    MODIFIER_FIELDS,
    NOUN_OPTIONAL_FIELDS,
    NOUN_PLURAL_COLUMNS,
    NOUN_SINGULAR_FIELDS,
    coerce_case,
    parse_animacy,
    parse_gender,
)
from languages.russian.records import AdjectiveRecord, NounRecord, PronounRecord, SentenceStemRecord
from languages.russian.store import LexiconData

log = lexicon_logger()

R = TypeVar("R")

_ORIGIN = "lexicon_loader"


@dataclass(frozen=True, slots=True)
class LexiconFiles:
    """Paths of the four lexicon files."""
    nouns: Path
    adjectives: Path
    pronouns: Path
    stems: Path

    @classmethod
    def in_dir(
        cls,
        directory: Path | str,
        nouns: str = "nouns.csv",
        adjectives: str = "adjectives.csv",
        pronouns: str = "pronouns.csv",
        stems: str = "sentence_stems.csv",
    ) -> "LexiconFiles":
        d = Path(directory)
        return cls(nouns=d / nouns, adjectives=d / adjectives, pronouns=d / pronouns, stems=d / stems)

    @classmethod
    def from_settings(cls, settings: Settings) -> "LexiconFiles":
        return cls.in_dir(
            settings.LEXICON_DIR,
            nouns=settings.NOUNS_FILE,
            adjectives=settings.ADJECTIVES_FILE,
            pronouns=settings.PRONOUNS_FILE,
            stems=settings.STEMS_FILE,
        )


def _rows(path: Path) -> Iterator[tuple[int, dict[str, str]]]:
    with open(path, encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            if not any((v or "").strip() for v in row.values() if isinstance(v, str)):
                continue
            yield reader.line_num, {(k or "").strip(): (v or "").strip() for k, v in row.items() if isinstance(v, str)}


def _require(row: dict[str, str], columns: tuple[str, ...], path: Path, line: int) -> Result[dict[str, str], AppError]:
    for col in columns:
        if not row.get(col):
            return required_field(col, origin=_ORIGIN, file=path.name, line=line)
    return Ok({col: row[col] for col in columns})


def parse_noun_row(row: dict[str, str], path: Path, line: int) -> Result[NounRecord, AppError]:
    plural_columns = tuple(c for c, f in NOUN_PLURAL_COLUMNS.items() if f not in NOUN_OPTIONAL_FIELDS)
    required = _require(row, NOUN_SINGULAR_FIELDS + plural_columns + ("gender", "animate"), path, line)
    if required.is_err():
        return required
    cells = required.unwrap()
    word = cells["nom"]

    gender = parse_gender(word, cells["gender"], origin=_ORIGIN)
    if gender.is_err():
        return gender
    animacy = parse_animacy(word, cells["animate"], origin=_ORIGIN)
    if animacy.is_err():
        return animacy

    forms = {f: cells[f] for f in NOUN_SINGULAR_FIELDS}
    for column, field_key in NOUN_PLURAL_COLUMNS.items():
        if row.get(column):
            forms[field_key] = row[column]

    return Ok(NounRecord(canonical=word, gender=gender.unwrap(), animacy=animacy.unwrap(), forms=forms))


def _modifier_parser(record_cls: type[R]) -> Callable[[dict[str, str], Path, int], Result[R, AppError]]:
    def parse(row: dict[str, str], path: Path, line: int) -> Result[R, AppError]:
        return _require(row, MODIFIER_FIELDS, path, line).map(
            lambda cells: record_cls(canonical=cells["masc_nom"], forms=cells)
        )
    return parse


parse_adjective_row = _modifier_parser(AdjectiveRecord)
parse_pronoun_row = _modifier_parser(PronounRecord)


def parse_stem_row(row: dict[str, str], path: Path, line: int) -> Result[SentenceStemRecord, AppError]:
    required = _require(row, ("case", "rus", "eng"), path, line)
    if required.is_err():
        return required
    cells = required.unwrap()
    return coerce_case(cells["case"], origin=_ORIGIN).map(
        lambda case: SentenceStemRecord(case=case, russian=cells["rus"], english=cells["eng"])
    )


def load_file(path: Path | str, parse_row: Callable[[dict[str, str], Path, int], Result[R, AppError]]) -> Result[list[R], AppError]:
    """Parse every row of one lexicon file, failing on the first bad row."""
    path = Path(path)
    if not path.is_file():
        return file_not_found(path, origin=_ORIGIN)
    try:
        results = [parse_row(row, path, line) for line, row in _rows(path)]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        return file_read_error(path, e, origin=_ORIGIN)

    records = sequence_results(results)
    match records:
        case Ok(items):
            log.debug("lexicon_file_loaded", file=path.name, records=len(items))
        case Err(error):
            log.error("lexicon_file_rejected", file=path.name, error_code=error.code.name, message=error.message)
    return records


def load_lexicon(files: LexiconFiles) -> Result[LexiconData, AppError]:
    """Load all four files into a `LexiconData` ready for `LexiconStore.build`."""
    loaded = {}
    for name, path, parse_row in (
        ("nouns", files.nouns, parse_noun_row),
        ("adjectives", files.adjectives, parse_adjective_row),
        ("pronouns", files.pronouns, parse_pronoun_row),
        ("stems", files.stems, parse_stem_row),
    ):
        result = load_file(path, parse_row)
        if result.is_err():
            return result
        loaded[name] = tuple(result.unwrap())

    log.info("lexicon_loaded", **{k: len(v) for k, v in loaded.items()})
    return Ok(LexiconData(**loaded))
