"""Factory functions for creating translation registries.

Provides a convenience function that builds a Translator from the
application settings, suitable for wiring at startup.
"""

from typing import Iterable, Optional

from core.config import Settings, settings as default_settings
from core.logging import get_module_logger
from translation.translator import MessageSpec, Translator

logger = get_module_logger()


def create_translator(
    languages: Optional[Iterable[str]] = None,
    strict_placeholders: Optional[bool] = None,
    messages: Optional[Iterable[MessageSpec]] = None,
    freeze: bool = False,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Arguments left as None are taken from ``settings.translation``.

    Args:
        languages: Supported languages (default: I18N_LANGUAGES).
        strict_placeholders: Reject overlapping placeholders
            (default: I18N_STRICT_PLACEHOLDERS).
        messages: Optional (key, placeholders, translations) tuples to add.
        freeze: Freeze the registry once messages are added.
        settings: Settings to read defaults from (default: module settings).

    Returns:
        Translator: Configured translator instance.

    Raises:
        TranslationError: If any of the supplied messages is invalid.

    Usage:
        # Languages and strictness from the environment
        translator = create_translator()

        # Explicit languages, pre-populated and frozen
        translator = create_translator(
            languages=["en", "fr"],
            messages=[("greetings", ["NAME"], {"en": "Hi NAME", "fr": "Salut NAME"})],
            freeze=True,
        )
    """
    translation_settings = (settings or default_settings).translation

    if languages is None:
        languages = translation_settings.LANGUAGES
    if strict_placeholders is None:
        strict_placeholders = translation_settings.STRICT_PLACEHOLDERS

    translator = Translator(languages, strict_placeholders=strict_placeholders)

    if messages is not None:
        translator.add_messages(messages)

    if freeze:
        translator.freeze()

    logger.info(
        "translator_created",
        languages=list(translator.languages),
        message_count=len(translator),
        frozen=translator.is_frozen,
    )
    return translator
