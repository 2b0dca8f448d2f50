"""Translation models for the registry.

Defines the closed language enumeration and the per-key message entries.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, NewType, Optional, Tuple

from translation.errors import UnknownLanguageError

LanguageId = NewType("LanguageId", int)


@dataclass(frozen=True)
class LanguageTable:
    """Ordered, deduplicated set of supported language identifiers.

    A language's LanguageId is its index in ``languages``. The table is
    fixed when the registry is built and never changes afterwards.

    Attributes:
        languages: Sorted tuple of unique language identifiers.
    """

    languages: Tuple[str, ...] = ()
    _index: Mapping[str, LanguageId] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        index = {lang: LanguageId(i) for i, lang in enumerate(self.languages)}
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def from_iterable(cls, languages: Iterable[str]) -> "LanguageTable":
        """Build a table from any iterable of language identifiers.

        Duplicates are collapsed and the result is sorted, so the same set
        of languages always yields the same LanguageId assignment.

        Args:
            languages: Language identifiers (e.g., ["pt", "en", "it"]).

        Returns:
            LanguageTable instance.
        """
        if isinstance(languages, str):
            languages = [languages]
        return cls(languages=tuple(sorted({str(lang) for lang in languages})))

    def get(self, language: str) -> Optional[LanguageId]:
        """Return the LanguageId for a language, or None if unsupported."""
        return self._index.get(language)

    def resolve(self, language: str) -> LanguageId:
        """Return the LanguageId for a language.

        Raises:
            UnknownLanguageError: If the language is not in the table.
        """
        language_id = self.get(language)
        if language_id is None:
            raise UnknownLanguageError(language)
        return language_id

    def language_for(self, language_id: int) -> str:
        """Return the language identifier behind a LanguageId.

        Raises:
            UnknownLanguageError: If the id is out of range.
        """
        if not 0 <= language_id < len(self.languages):
            raise UnknownLanguageError(str(language_id))
        return self.languages[language_id]

    def __len__(self) -> int:
        return len(self.languages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.languages)

    def __contains__(self, language: object) -> bool:
        return language in self._index


@dataclass(frozen=True)
class MessageEntry:
    """All templates registered under one message key.

    Attributes:
        placeholders: Declared placeholder names, in declaration order.
        templates: Template string for every LanguageId of the registry.
    """

    placeholders: Tuple[str, ...]
    templates: Mapping[LanguageId, str]

    @classmethod
    def create(
        cls, placeholders: Iterable[str], templates: Dict[LanguageId, str]
    ) -> "MessageEntry":
        """Create an entry holding a read-only copy of the templates."""
        return cls(
            placeholders=tuple(placeholders),
            templates=MappingProxyType(dict(templates)),
        )

    def template_for(self, language_id: LanguageId) -> str:
        """Return the template for a LanguageId."""
        return self.templates[language_id]

    def declares(self, name: str) -> bool:
        """Check whether a placeholder name is declared for this message."""
        return name in self.placeholders
