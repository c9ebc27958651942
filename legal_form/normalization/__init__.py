"""Normalization modules."""

from .aliases import WILDCARD, Aliases
from .company_normalizer import CompanyNormalizer
from .legal_forms import LegalForms

__all__ = ["WILDCARD", "Aliases", "CompanyNormalizer", "LegalForms"]
