"""
Exception types for the password generator.

Hierarchy:
    PassGenError (base)
    ├── ValidationError     requested length outside the allowed range
    ├── RandomnessFailure   the OS CSPRNG could not supply bytes
    ├── ConfigError         malformed SPGEN_* environment variable
    └── ParseError          shell input is not an integer
"""

from __future__ import annotations

from typing import Optional


class PassGenError(Exception):
    """
    Base exception for all generator errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional error details (optional)
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[dict] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert exception to a plain dictionary."""
        result = {
            "error": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(PassGenError, ValueError):
    """Requested password length is outside the valid range."""

    def __init__(self, value: object, valid_range: tuple[int, int]):
        self.value = value
        self.valid_range = valid_range
        low, high = valid_range
        super().__init__(
            f"Password length must be between {low} and {high} characters, got {value!r}.",
            "INVALID_LENGTH",
            {"value": value, "valid_range": [low, high]},
        )


class RandomnessFailure(PassGenError, RuntimeError):
    """The secure random source could not supply the requested bytes."""

    def __init__(self, message: str = "Secure random source failed."):
        super().__init__(message, "RANDOMNESS_FAILURE")


class ConfigError(PassGenError, ValueError):
    """An SPGEN_* environment variable holds an unusable value."""

    def __init__(self, fields: list[str], reason: str):
        self.fields = fields
        super().__init__(
            f"Invalid configuration in {', '.join(fields) or 'environment'}.",
            "INVALID_CONFIG",
            {"fields": fields, "reason": reason},
        )


class ParseError(PassGenError, ValueError):
    """Text given as a password length is not an integer."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"Invalid length input: {text!r} is not a whole number.",
            "INVALID_NUMBER",
            {"text": text},
        )
