"""Translation registry for keyed, multi-language message templates.

Messages are registered once per key with a template for every supported
language, then translated any number of times with placeholder bindings.
The registry is built single-threaded, optionally frozen, and then shared
read-only: translate() keeps no state between calls.
"""

from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from core.logging import get_module_logger
from translation.errors import (
    DuplicatedArgumentError,
    DuplicatedKeyError,
    InvalidPlaceholderError,
    MissingKeyError,
    MissingLanguageError,
    OverlappingPlaceholderError,
    RegistryFrozenError,
    UnknownArgumentError,
    UnknownLanguageError,
)
from translation.models import LanguageId, LanguageTable, MessageEntry
from translation.substitution import find_prefix_collision, substitute

logger = get_module_logger()

Pairs = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]
MessageSpec = Tuple[str, Iterable[str], Pairs]


def _iter_pairs(pairs: Optional[Pairs]) -> Iterable[Tuple[str, Any]]:
    if pairs is None:
        return ()
    if isinstance(pairs, Mapping):
        return pairs.items()
    return pairs


class Translator:
    """Registry of message templates keyed by message key and language.

    Attributes:
        language_table: Fixed LanguageTable of supported languages.
        strict_placeholders: Reject messages where one placeholder is a
            prefix of another.
    """

    def __init__(self, languages: Iterable[str], strict_placeholders: bool = False):
        """Initialize Translator.

        Args:
            languages: Supported language identifiers. Duplicates are collapsed
                and the set is sorted to fix each language's LanguageId.
            strict_placeholders: Reject overlapping placeholder declarations.
        """
        self.language_table = LanguageTable.from_iterable(languages)
        self.strict_placeholders = strict_placeholders
        self._messages: Dict[str, MessageEntry] = {}
        self._frozen = False
        logger.info(
            "initialized_translator",
            languages=list(self.language_table),
            strict_placeholders=strict_placeholders,
        )

    @property
    def languages(self) -> Tuple[str, ...]:
        """Supported languages, in LanguageId order."""
        return self.language_table.languages

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Stop accepting new messages.

        After freezing, the registry is safe to share between threads that
        only call read operations.
        """
        if not self._frozen:
            self._frozen = True
            logger.info("froze_translator", message_count=len(self._messages))

    def add_message(
        self,
        key: str,
        placeholders: Iterable[str],
        translations: Pairs,
    ) -> None:
        """Register the templates of a new message key.

        Validation happens before anything is stored, so a failed call
        leaves the registry unchanged.

        Args:
            key: Message key (e.g., "greetings").
            placeholders: Placeholder names used in the templates.
            translations: (language, template) pairs or a language -> template
                mapping, covering every supported language exactly once.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
            DuplicatedKeyError: If the key exists or a language is repeated.
            InvalidPlaceholderError: If a placeholder name is empty.
            DuplicatedArgumentError: If a placeholder is declared twice.
            OverlappingPlaceholderError: In strict mode, if a placeholder is a
                prefix of another.
            UnknownLanguageError: If a language is not supported.
            MissingLanguageError: If a supported language has no template.
        """
        if self._frozen:
            logger.warning("translator_frozen", key=key)
            raise RegistryFrozenError(key)

        if key in self._messages:
            logger.warning("duplicated_message_key", key=key)
            raise DuplicatedKeyError(key)

        declared = self._validate_placeholders(key, placeholders)

        templates: Dict[LanguageId, str] = {}
        for language, template in _iter_pairs(translations):
            language_id = self._resolve_language(key, language)
            if language_id in templates:
                logger.warning("duplicated_translation", key=key, language=language)
                raise DuplicatedKeyError(language)
            templates[language_id] = template

        if len(templates) < len(self.language_table):
            missing = [
                lang
                for lang_id, lang in enumerate(self.language_table)
                if lang_id not in templates
            ]
            logger.warning("missing_translations", key=key, missing=missing)
            raise MissingLanguageError(missing[0])

        self._messages[key] = MessageEntry.create(declared, templates)
        logger.debug("message_added", key=key, placeholders=list(declared))

    def add_messages(self, messages: Iterable[MessageSpec]) -> int:
        """Register several messages, as supplied by an external loader.

        Each message is added atomically; the first failure stops the
        batch and is raised, leaving earlier messages registered.

        Args:
            messages: (key, placeholders, translations) tuples.

        Returns:
            Number of messages added.
        """
        count = 0
        for key, placeholders, translations in messages:
            self.add_message(key, placeholders, translations)
            count += 1
        logger.info("messages_added", count=count)
        return count

    def translate(
        self,
        key: str,
        language: str,
        bindings: Optional[Pairs] = None,
    ) -> str:
        """Retrieve a message and substitute its placeholders.

        Args:
            key: Message key.
            language: Language identifier.
            bindings: (placeholder, value) pairs or a placeholder -> value
                mapping. Unbound placeholders are left as literal text.

        Returns:
            The substituted message.

        Raises:
            MissingKeyError: If the key is not registered.
            UnknownLanguageError: If the language is not supported.
            UnknownArgumentError: If a binding names an undeclared placeholder.
            DuplicatedArgumentError: If a placeholder is bound twice.
            SubstitutionEngineError: If the substitution itself fails.
        """
        entry = self._get_entry(key)
        language_id = self._resolve_language(key, language)

        values: Dict[str, str] = {}
        for name, value in _iter_pairs(bindings):
            if not entry.declares(name):
                logger.warning("unknown_argument", key=key, argument=name)
                raise UnknownArgumentError(name)
            if name in values:
                logger.warning("duplicated_argument", key=key, argument=name)
                raise DuplicatedArgumentError(name)
            values[name] = str(value)

        # Declaration order decides which placeholder wins when several
        # match at the same position.
        ordered = [
            (name, values[name]) for name in entry.placeholders if name in values
        ]
        return substitute(entry.template_for(language_id), ordered)

    def has_message(self, key: str) -> bool:
        """Check if a message key is registered."""
        return key in self._messages

    def get_placeholders(self, key: str) -> Tuple[str, ...]:
        """Get the declared placeholders of a message.

        Raises:
            MissingKeyError: If the key is not registered.
        """
        return self._get_entry(key).placeholders

    def get_template(self, key: str, language: str) -> str:
        """Get the raw, unsubstituted template of a message.

        Raises:
            MissingKeyError: If the key is not registered.
            UnknownLanguageError: If the language is not supported.
        """
        entry = self._get_entry(key)
        return entry.template_for(self._resolve_language(key, language))

    def keys(self) -> List[str]:
        """Get all registered message keys, in registration order."""
        return list(self._messages)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def _get_entry(self, key: str) -> MessageEntry:
        entry = self._messages.get(key)
        if entry is None:
            logger.warning("translation_key_not_found", key=key)
            raise MissingKeyError(key)
        return entry

    def _resolve_language(self, key: str, language: str) -> LanguageId:
        try:
            return self.language_table.resolve(language)
        except UnknownLanguageError:
            logger.warning(
                "unknown_language",
                key=key,
                language=language,
                supported=list(self.language_table),
            )
            raise

    def _validate_placeholders(
        self, key: str, placeholders: Iterable[str]
    ) -> Tuple[str, ...]:
        if isinstance(placeholders, str):
            placeholders = [placeholders]

        declared: List[str] = []
        for name in placeholders:
            if not name:
                logger.warning("invalid_placeholder", key=key, placeholder=name)
                raise InvalidPlaceholderError(name)
            if name in declared:
                logger.warning("duplicated_placeholder", key=key, placeholder=name)
                raise DuplicatedArgumentError(name)
            declared.append(name)

        if self.strict_placeholders:
            collision = find_prefix_collision(declared)
            if collision is not None:
                logger.warning(
                    "overlapping_placeholders",
                    key=key,
                    prefix=collision[0],
                    placeholder=collision[1],
                )
                raise OverlappingPlaceholderError(*collision)

        return tuple(declared)
