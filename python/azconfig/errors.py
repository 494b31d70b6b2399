"""
azconfig/errors.py

Exception hierarchy raised while loading a credentials configuration and
turning it into an Azure token credential.

    ConfigError
     ├── DecodeError        (file missing, unreadable or malformed)
     ├── ValidationError    (required field missing, or credential rejected)
     ├── MissingFieldError  (a single empty identity field)
     └── AuthError          (azure-identity refused the inputs)

Every layer re-raises with ``raise ... from exc`` so callers get one
descriptive error with the full chain in ``__cause__``.
"""

from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """Base class for every error raised by azconfig."""


class DecodeError(ConfigError):
    """The configuration document could not be read or decoded.

    Attributes:
        path (Optional[str]): The file that failed to decode, if any.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class ValidationError(ConfigError):
    """A decoded configuration failed validation."""


class MissingFieldError(ConfigError):
    """A required credential field is empty.

    Attributes:
        field (str): Name of the missing field, e.g. ``tenant_id``.
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"missing {field}")
        self.field = field


class AuthError(ConfigError):
    """The identity library rejected the credential inputs."""


__all__ = [
    "ConfigError",
    "DecodeError",
    "ValidationError",
    "MissingFieldError",
    "AuthError",
]
