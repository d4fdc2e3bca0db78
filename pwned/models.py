"""Pydantic models for range lookup records and results."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SuffixRecord(BaseModel):
    """One `SUFFIX:COUNT` line returned by the range API."""
    model_config = ConfigDict(frozen=True)

    suffix: str
    frequency: int = Field(..., ge=0)

    @field_validator("suffix")
    @classmethod
    def canonical_case(cls, v: str) -> str:
        return v.upper()

    def full_hash(self, prefix: str) -> str:
        """Rebuild the candidate digest this record stands for."""
        return prefix.upper() + self.suffix


class LookupResult(BaseModel):
    """Outcome of a breach check.

    The digest is kept out of repr() so logging a result never leaks it.
    """
    model_config = ConfigDict(frozen=True)

    breached: bool
    frequency: int = Field(default=0, ge=0)
    sha1_hash: str = Field(..., repr=False)

    @field_validator("sha1_hash")
    @classmethod
    def canonical_hash(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def frequency_requires_breach(self) -> "LookupResult":
        if not self.breached and self.frequency != 0:
            raise ValueError("frequency must be 0 when the password is not breached")
        return self
