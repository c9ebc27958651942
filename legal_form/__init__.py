"""Split legal forms off company names and resolve them to canonical aliases."""

from functools import lru_cache

from .config_loader import Config, load_aliases, load_legal_forms
from .models import NormalizedName
from .normalization import WILDCARD, Aliases, CompanyNormalizer, LegalForms

__all__ = [
    "WILDCARD",
    "Aliases",
    "CompanyNormalizer",
    "LegalForms",
    "NormalizedName",
    "default_aliases",
    "default_legal_forms",
    "find",
    "strip",
    "strip_middle",
]


@lru_cache(maxsize=None)
def default_legal_forms() -> LegalForms:
    """Return the bundled legal forms, loaded once per process."""
    return load_legal_forms(Config())


@lru_cache(maxsize=None)
def default_aliases() -> Aliases:
    """Return the bundled alias table, loaded once per process."""
    return load_aliases(Config())


def strip(full_name: str) -> tuple[str, str]:
    """Split a name into company name and trailing legal form."""
    return default_legal_forms().strip(full_name)


def strip_middle(full_name: str) -> tuple[str, str, str]:
    """Split a name into company name, legal form and the text after it."""
    return default_legal_forms().strip_middle(full_name)


def find(country: str, legal_form: str) -> str:
    """Resolve a legal form to its alias for the given country."""
    return default_aliases().find(country, legal_form)
