"""Data models for normalized company names."""

from typing import Optional

from pydantic import BaseModel, Field


class NormalizedName(BaseModel):
    """A company name split into its parts."""

    original: str = Field(description="Name as it was passed in")
    company: str = Field(description="Name without the legal form")
    legal_form: str = Field(default="", description="Legal form as written in the name")
    trailing: str = Field(default="", description="Text after the legal form")
    alias: Optional[str] = Field(
        default=None, description="Canonical alias of the legal form, None if there is none"
    )
    country: str = Field(default="*", description="Country code used to resolve the alias")

    @property
    def has_legal_form(self) -> bool:
        return bool(self.legal_form)
