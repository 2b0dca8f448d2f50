"""Test data factories for translation registry testing.

Provides deterministic test data builders for:
- LanguageTable
- Translator instances with registered messages
- Message specs as produced by a loader
"""

from typing import Dict, Iterable, List, Optional, Tuple

from translation import LanguageTable, Translator

DEFAULT_LANGUAGES = ["pt", "en", "it"]

GREETINGS: Dict[str, str] = {
    "en": "Good morning, NAME!",
    "pt": "Bom dia, NAME!",
    "it": "Buongiorno, NAME!",
}


def make_language_table(languages: Optional[Iterable[str]] = None) -> LanguageTable:
    """Create a LanguageTable instance.

    Args:
        languages: Language identifiers (default: pt, en, it).

    Returns:
        LanguageTable instance.
    """
    return LanguageTable.from_iterable(
        DEFAULT_LANGUAGES if languages is None else languages
    )


def make_message_spec(
    key: str = "greetings",
    placeholders: Optional[List[str]] = None,
    translations: Optional[Dict[str, str]] = None,
) -> Tuple[str, List[str], Dict[str, str]]:
    """Create a (key, placeholders, translations) tuple.

    Args:
        key: Message key.
        placeholders: Declared placeholders (default: ["NAME"]).
        translations: Language -> template mapping (default: greetings).

    Returns:
        Message spec tuple.
    """
    return (
        key,
        ["NAME"] if placeholders is None else placeholders,
        dict(GREETINGS) if translations is None else translations,
    )


def make_translator(
    languages: Optional[Iterable[str]] = None,
    messages: Optional[Iterable[Tuple]] = None,
    strict_placeholders: bool = False,
) -> Translator:
    """Create a Translator with registered messages.

    Args:
        languages: Supported languages (default: pt, en, it).
        messages: Message specs to add (default: the greetings message).
        strict_placeholders: Reject overlapping placeholders.

    Returns:
        Translator instance.
    """
    translator = Translator(
        DEFAULT_LANGUAGES if languages is None else languages,
        strict_placeholders=strict_placeholders,
    )
    for key, placeholders, translations in (
        [make_message_spec()] if messages is None else messages
    ):
        translator.add_message(key, placeholders, translations)
    return translator
