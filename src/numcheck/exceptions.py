"""numcheck exception hierarchy."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Why a number was rejected."""

    INVALID_FORMAT = "InvalidFormat"
    INVALID_LENGTH = "InvalidLength"
    INVALID_CHECKSUM = "InvalidChecksum"


class NumcheckError(Exception):
    """Base exception for all numcheck errors."""


class ValidationError(NumcheckError):
    """A number failed normalization, structural or checksum checks."""

    kind: ErrorKind
    default_message = "The number is invalid."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidFormat(ValidationError):
    """The number contains characters outside the permitted alphabet."""

    kind = ErrorKind.INVALID_FORMAT
    default_message = "The number has an invalid format."


class InvalidLength(ValidationError):
    """The compact number does not have the required length."""

    kind = ErrorKind.INVALID_LENGTH
    default_message = "The number has an invalid length."


class InvalidChecksum(ValidationError):
    """The check digit does not match the recomputed value."""

    kind = ErrorKind.INVALID_CHECKSUM
    default_message = "The number's checksum or check digit is invalid."


class UnknownValidator(NumcheckError, KeyError):
    """No validator is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown number type: {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class ConfigError(NumcheckError):
    """Configuration file could not be read or failed schema validation."""
