"""Validation result model shared by all input validators."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class ValidationResult(BaseModel):
    """Outcome of a single validation check.

    ``error`` is only set when ``valid`` is False.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    valid: bool
    error: str | None = None

    @model_validator(mode="after")
    def check_error_matches_validity(self) -> ValidationResult:
        """A valid result carries no error; an invalid one must explain itself."""
        if self.valid and self.error is not None:
            msg = "error must not be set on a valid result"
            raise ValueError(msg)
        if not self.valid and not self.error:
            msg = "error is required on an invalid result"
            raise ValueError(msg)
        return self

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> ValidationResult:
        return cls(valid=False, error=error)

    def __bool__(self) -> bool:
        return self.valid
