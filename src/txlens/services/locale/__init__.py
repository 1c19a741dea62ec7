"""Localized strings for intents and validation findings."""

from txlens.services.locale.strings import DictLocale, Locale, substitute, to_proper_case

__all__ = ["DictLocale", "Locale", "substitute", "to_proper_case"]
