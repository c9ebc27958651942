"""Company name normalizer."""

import logging
from typing import Iterable, Optional

from ..models import NormalizedName
from ..utils.text import clean, compact, fold_diacritics
from .aliases import WILDCARD, Aliases
from .legal_forms import LegalForms

logger = logging.getLogger(__name__)

STRIP_MODES = ("suffix", "middle")


class CompanyNormalizer:
    """Split company names into name and legal form and resolve the alias."""

    def __init__(
        self,
        legal_forms: LegalForms,
        aliases: Aliases,
        default_country: str = WILDCARD,
        mode: str = "suffix",
    ):
        if mode not in STRIP_MODES:
            raise ValueError(f"Unknown strip mode: {mode} (expected one of {STRIP_MODES})")
        self.legal_forms = legal_forms
        self.aliases = aliases
        self.default_country = default_country.upper()
        self.mode = mode

    def normalize(self, full_name: str, country: Optional[str] = None) -> NormalizedName:
        """Normalize a single company name."""
        country = (country or self.default_country).upper()

        if self.mode == "middle":
            company, legal_form, trailing = self.legal_forms.strip_middle(full_name)
        else:
            company, legal_form = self.legal_forms.strip(full_name)
            trailing = ""

        alias = self.aliases.find(country, legal_form) if legal_form else None

        return NormalizedName(
            original=full_name,
            company=company,
            legal_form=legal_form,
            trailing=trailing,
            alias=alias,
            country=country,
        )

    def normalize_many(
        self, names: Iterable[str], country: Optional[str] = None
    ) -> list[NormalizedName]:
        """Normalize a batch of company names."""
        results = [self.normalize(name, country) for name in names]
        found = sum(1 for result in results if result.has_legal_form)
        logger.debug(f"Normalized {len(results)} names, {found} with legal form")
        return results

    def key(self, full_name: str, country: Optional[str] = None) -> str:
        """
        Build a matching key that does not depend on how the legal form is
        spelled, e.g. "Example GmbH" and "Example Gesellschaft mit beschränkter
        Haftung" both give "example|gmbh" for DE.
        """
        result = self.normalize(full_name, country)
        company_key = fold_diacritics(compact(clean(result.company)))
        return f"{company_key}|{result.alias or ''}"
