#!/usr/bin/env python3
"""Verify the lexicon files against the declension agreement rules.

Loads the configured lexicon, builds the store and checks every noun (and
every adjective/pronoun against every noun) for the forms the rules say must
coincide. Exits non-zero on any violation.

Run with: python3 -m scripts.verify_lexicon [--dir PATH]
"""
import argparse
import sys
from pathlib import Path

from bootstrap import build_service
from core.config import get_settings
from core.logging import configure_logging
from languages.russian import DeclensionService
from languages.types import Animacy, Gender, GrammaticalCase, GrammaticalNumber, LexemeCategory

NOM, GEN, ACC = GrammaticalCase.NOMINATIVE, GrammaticalCase.GENITIVE, GrammaticalCase.ACCUSATIVE
SG, PL = GrammaticalNumber.SINGULAR, GrammaticalNumber.PLURAL
FEMININE_OBLIQUE = (GEN, GrammaticalCase.DATIVE, GrammaticalCase.INSTRUMENTAL, GrammaticalCase.PREPOSITIONAL)


def check_nouns(service: DeclensionService) -> list[str]:
    """Noun-level agreement checks."""
    problems = []
    for noun in service.store.records(LexemeCategory.NOUN):
        def form(case, number):
            return service.decline_noun(noun.canonical, case, number).unwrap_or(None)

        w = noun.canonical
        if form(NOM, SG) != w:
            problems.append(f"{w}: nominative singular {form(NOM, SG)!r} differs from the key")
        if noun.gender is Gender.MASCULINE:
            expected = GEN if noun.animacy is Animacy.ANIMATE else NOM
            if form(ACC, SG) != form(expected, SG):
                problems.append(f"{w}: accusative singular should equal {expected.value}")
        if noun.gender is Gender.NEUTER and form(ACC, SG) != form(NOM, SG):
            problems.append(f"{w}: neuter accusative singular should equal nominative")
        for case in GrammaticalCase:
            for number in GrammaticalNumber:
                if form(case, number) is None:
                    problems.append(f"{w}: no {case.value} {number.value} form")
    return problems


def check_modifiers(service: DeclensionService, category: LexemeCategory) -> list[str]:
    """Feminine oblique cases must share one form."""
    problems = []
    feminine = service.select_nouns(lambda n: n.gender is Gender.FEMININE)
    for word in sorted(service.store.keys(category)):
        for noun in feminine[:1]:
            forms = {service.decline(category, word, c, SG, noun=noun).unwrap_or(None) for c in FEMININE_OBLIQUE}
            if len(forms) != 1:
                problems.append(f"{word}: feminine oblique forms differ {sorted(map(str, forms))}")
        for noun in service.store.keys(LexemeCategory.NOUN):
            for case in GrammaticalCase:
                for number in GrammaticalNumber:
                    if service.decline(category, word, case, number, noun=noun).is_err():
                        problems.append(f"{word} + {noun}: no {case.value} {number.value} form")
    return problems


def main() -> int:
    parser = argparse.ArgumentParser(description="Verify lexicon data files")
    parser.add_argument("--dir", type=Path, help="Lexicon directory (defaults to LEXICON_DIR)")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    args = parser.parse_args()

    configure_logging(level="DEBUG" if args.verbose else "WARNING")
    settings = get_settings()
    if args.dir:
        settings = settings.model_copy(update={"LEXICON_DIR": args.dir})

    result = build_service(settings)
    if result.is_err():
        print(f"❌ {result.unwrap_err()}")
        return 1
    service = result.unwrap()

    for name, count in service.store.summary().items():
        print(f"✅ {name}: {count}")

    problems = check_nouns(service)
    for category in (LexemeCategory.ADJECTIVE, LexemeCategory.PRONOUN):
        problems.extend(check_modifiers(service, category))

    for p in problems:
        print(f"  ❌ {p}")
    print(f"{'❌' if problems else '✅'} {len(problems)} problem(s)")
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
