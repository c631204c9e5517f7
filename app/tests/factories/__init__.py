"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    POLISH_PLURAL_FORMS,
    make_message,
    make_translation_catalog,
    make_translator,
    polish_plural_form,
)

__all__ = [
    "POLISH_PLURAL_FORMS",
    "make_message",
    "make_translation_catalog",
    "make_translator",
    "polish_plural_form",
]
