"""Keyed, multi-language message templates.

Main components:
- models: LanguageTable, LanguageId, MessageEntry
- errors: TranslationError and its subclasses
- substitution: single-pass placeholder replacement
- translator: Translator registry (add_message / translate)
- factory: create_translator() from settings
"""

from translation.errors import (
    DuplicatedArgumentError,
    DuplicatedKeyError,
    InvalidPlaceholderError,
    MissingKeyError,
    MissingLanguageError,
    OverlappingPlaceholderError,
    RegistryFrozenError,
    SubstitutionEngineError,
    TranslationError,
    UnknownArgumentError,
    UnknownLanguageError,
)
from translation.factory import create_translator
from translation.models import LanguageId, LanguageTable, MessageEntry
from translation.translator import Translator

__all__ = [
    "LanguageId",
    "LanguageTable",
    "MessageEntry",
    "Translator",
    "create_translator",
    "TranslationError",
    "DuplicatedKeyError",
    "DuplicatedArgumentError",
    "UnknownLanguageError",
    "UnknownArgumentError",
    "MissingKeyError",
    "MissingLanguageError",
    "SubstitutionEngineError",
    "OverlappingPlaceholderError",
    "InvalidPlaceholderError",
    "RegistryFrozenError",
]
