"""Country specific legal form aliases."""

from types import MappingProxyType
from typing import Mapping

from ..utils.text import clean, compact, fold_diacritics

# Country key of the table that applies to every country
WILDCARD = "*"


class Aliases:
    """
    Two-level alias table: country code (or WILDCARD) -> cleaned legal form
    phrase -> canonical alias.
    """

    def __init__(self, table: Mapping[str, Mapping[str, str]]):
        merged: dict[str, dict[str, str]] = {}
        for country, phrases in table.items():
            # "de" and "DE" describe the same country
            merged.setdefault(country.upper(), {}).update(phrases)
        self._table = MappingProxyType(
            {country: MappingProxyType(phrases) for country, phrases in merged.items()}
        )

    def __repr__(self) -> str:
        return f"Aliases({len(self._table)} countries)"

    def countries(self) -> list[str]:
        """Return the country codes with an alias table, WILDCARD included."""
        return sorted(self._table)

    def get(self, country: str) -> Mapping[str, str]:
        """Return the read-only phrase table of a country."""
        return self._table.get(country.upper(), MappingProxyType({}))

    def find(self, country: str, legal_form: str) -> str:
        """
        Resolve a legal form to its canonical alias.

        The country table is consulted first, then the WILDCARD table. If
        neither knows the legal form, its cleaned text is returned. Text that
        cleans to nothing (e.g. "&") is echoed lowercased instead, so the
        result is never empty for a non-empty legal form.
        """
        cleaned = compact(clean(legal_form))
        key = fold_diacritics(cleaned)
        for table_key in (country.upper(), WILDCARD):
            alias = self._table.get(table_key, {}).get(key)
            if alias:
                return alias
        return cleaned or compact(legal_form.lower()) or legal_form
