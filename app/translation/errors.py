"""Custom exceptions for the translation engine.

Every failure of the registry and the substitution engine is reported as a
subclass of TranslationError. Errors compare equal when they have the same
type and carry the same values, so callers and tests can assert on them
directly:

    >>> UnknownLanguageError("cz") == UnknownLanguageError("cz")
    True
"""

from typing import Any


class TranslationError(Exception):
    """Base exception for all translation errors.

    Subclasses set ``template`` to the human readable message; positional
    arguments are interpolated into it and kept as ``args``.

    Example:
        try:
            translator.translate("greetings", "pt", {"NAME": "Julian"})
        except TranslationError as e:
            logger.error("translation_failed", error=str(e))
    """

    template = "{0}"

    def __str__(self) -> str:
        return self.template.format(*self.args)

    def __repr__(self) -> str:
        args = ", ".join(repr(arg) for arg in self.args)
        return f"{type(self).__name__}({args})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TranslationError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    @property
    def value(self) -> str:
        """The offending key, language or placeholder."""
        return self.args[0]


class DuplicatedKeyError(TranslationError):
    """Raised when a message key, or a language within one message, is added twice.

    Example:
        >>> translator.add_message("greetings", ["NAME"], {...})
        >>> translator.add_message("greetings", [], {...})
        Traceback (most recent call last):
        ...
        DuplicatedKeyError: Duplicated key `greetings`
    """

    template = "Duplicated key `{0}`"


class DuplicatedArgumentError(TranslationError):
    """Raised when a placeholder is declared or bound twice."""

    template = "Duplicated argument `{0}`"


class UnknownLanguageError(TranslationError, ValueError):
    """Raised when a language is not part of the registry's language set.

    Example:
        >>> translator.translate("greetings", "cz")
        Traceback (most recent call last):
        ...
        UnknownLanguageError: Unknown language key: `cz`
    """

    template = "Unknown language key: `{0}`"


class UnknownArgumentError(TranslationError, ValueError):
    """Raised when a binding names a placeholder the message does not declare."""

    template = "Unknown argument: `{0}`"


class MissingKeyError(TranslationError, KeyError):
    """Raised when a message key has not been registered."""

    template = "Key not found: `{0}`"


class MissingLanguageError(TranslationError):
    """Raised when a message does not provide a template for every language."""

    template = "Language not found: `{0}`"


class SubstitutionEngineError(TranslationError):
    """Raised when the placeholder matcher cannot be built or applied."""

    template = "Replacement error: `{0}`"


class OverlappingPlaceholderError(TranslationError):
    """Raised in strict mode when a declared placeholder prefixes another one."""

    template = "Placeholder `{0}` is a prefix of `{1}`"


class InvalidPlaceholderError(TranslationError, ValueError):
    """Raised when a declared placeholder name cannot be matched (empty name)."""

    template = "Invalid placeholder name: `{0}`"


class RegistryFrozenError(TranslationError):
    """Raised when adding a message after the registry has been frozen."""

    template = "Registry is frozen, cannot add `{0}`"
