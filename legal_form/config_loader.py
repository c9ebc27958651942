"""Configuration loader."""

import json
import logging
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field

from .normalization import Aliases, CompanyNormalizer, LegalForms

logger = logging.getLogger(__name__)


class Config(BaseModel):
    """Application configuration."""

    LEGAL_FORMS_PATH: Optional[str] = None
    ALIASES_PATH: Optional[str] = None
    DEFAULT_COUNTRY: str = Field(default="*")
    STRIP_MODE: Literal["suffix", "middle"] = Field(default="suffix")
    LOG_LEVEL: str = Field(default="INFO")

    @property
    def data_dir(self) -> Path:
        """Return directory of the bundled dictionaries."""
        return Path(__file__).parent / "data"

    @property
    def legal_forms_path_resolved(self) -> Path:
        """Resolve LEGAL_FORMS_PATH to the bundled file if None."""
        if self.LEGAL_FORMS_PATH:
            return Path(self.LEGAL_FORMS_PATH)
        return self.data_dir / "legal_forms.txt"

    @property
    def aliases_path_resolved(self) -> Path:
        """Resolve ALIASES_PATH to the bundled file if None."""
        if self.ALIASES_PATH:
            return Path(self.ALIASES_PATH)
        return self.data_dir / "aliases.json"


def load_config(config_path: str) -> Config:
    """Load configuration from YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return Config(**data)


def load_legal_forms(config: Config) -> LegalForms:
    """Load the cleaned legal form phrases, one per line."""
    path = config.legal_forms_path_resolved
    if not path.exists():
        raise FileNotFoundError(f"Legal forms not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        phrases = [
            line.strip()
            for line in f
            if line.strip() and not line.lstrip().startswith("#")
        ]

    legal_forms = LegalForms(phrases)
    logger.info(f"Loaded {len(legal_forms)} legal forms from {path}")
    return legal_forms


def load_aliases(config: Config) -> Aliases:
    """Load the country specific legal form aliases."""
    path = config.aliases_path_resolved
    if not path.exists():
        raise FileNotFoundError(f"Aliases not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data: Any = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Aliases must be a JSON object of countries: {path}")

    table = {}
    for country, phrases in data.items():
        if not isinstance(phrases, dict):
            raise ValueError(f"Aliases for {country} must be a JSON object: {path}")
        entries = {}
        for phrase, alias in phrases.items():
            if not isinstance(alias, str) or not alias:
                logger.warning(f"Skipping alias for {country}/{phrase}: {alias!r}")
                continue
            entries[phrase] = alias
        table[country] = entries

    aliases = Aliases(table)
    logger.info(f"Loaded aliases for {len(table)} countries from {path}")
    return aliases


def build_normalizer(config: Config) -> CompanyNormalizer:
    """Build a company normalizer from configuration."""
    return CompanyNormalizer(
        legal_forms=load_legal_forms(config),
        aliases=load_aliases(config),
        default_country=config.DEFAULT_COUNTRY,
        mode=config.STRIP_MODE,
    )
