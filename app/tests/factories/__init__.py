"""Test data factories for deterministic test data generation."""

from tests.factories.translation import (
    make_language_table,
    make_message_spec,
    make_translator,
)

__all__ = [
    "make_language_table",
    "make_message_spec",
    "make_translator",
]
