"""Locale lookup collaborator.

Lookups return raw templates; ``$1``, ``$2``, ... are filled in by the
caller with :func:`substitute`.
"""

from collections.abc import Mapping
from typing import Protocol

from txlens.constants.locale import DEFAULT_STRINGS


class Locale(Protocol):
    """Anything that maps a string key to a localized template."""

    def get(self, key: str) -> str:
        ...


class DictLocale:
    """Locale backed by a mapping, falling back to the English defaults.

    Unknown keys return the key itself so a missing translation shows up
    in the UI instead of an empty string.
    """

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings = {**DEFAULT_STRINGS, **(strings or {})}

    def get(self, key: str) -> str:
        return self._strings.get(key, key)


def substitute(template: str, *values: str) -> str:
    """Replace ``$1``..``$n`` with ``values`` in order."""
    result = template
    # Highest index first so $1 does not clobber the prefix of $10
    for index in range(len(values), 0, -1):
        result = result.replace(f"${index}", values[index - 1])
    return result


def to_proper_case(text: str) -> str:
    """Capitalize the first letter of each word, lower-casing the rest."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))
