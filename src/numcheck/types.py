"""Result records returned by the identifier validators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import ErrorKind, ValidationError


@dataclass(frozen=True)
class ValidateResult:
    """
    Outcome of a single ``validate`` call.

    A valid result carries the compact number and its classification flags;
    an invalid one carries the error raised by the failing stage.
    """

    is_valid: bool
    compact: Optional[str] = None
    is_individual: bool = False
    is_company: bool = False
    error: Optional[ValidationError] = None

    @classmethod
    def valid(cls, compact: str, *, is_individual: bool, is_company: bool) -> "ValidateResult":
        return cls(
            is_valid=True,
            compact=compact,
            is_individual=is_individual,
            is_company=is_company,
        )

    @classmethod
    def invalid(cls, error: ValidationError) -> "ValidateResult":
        return cls(is_valid=False, error=error)

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def to_dict(self) -> Dict[str, Any]:
        if self.is_valid:
            return {
                "is_valid": True,
                "compact": self.compact,
                "is_individual": self.is_individual,
                "is_company": self.is_company,
            }
        return {
            "is_valid": False,
            "error": self.error_kind.value if self.error_kind else None,
            "message": self.error.message if self.error else None,
        }
