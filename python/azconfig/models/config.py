"""
filename: azconfig/models/config.py

Top-level configuration document: a ``[credentials]`` table and a
``location`` string.
"""

from __future__ import annotations

import logging

from azure.core.credentials import TokenCredential
from azure.core.credentials_async import AsyncTokenCredential
from pydantic import BaseModel, ConfigDict, Field

from azconfig.errors import AuthError, ValidationError
from azconfig.models.credentials import AzureCredentials

logger = logging.getLogger(__name__)


class Configuration(BaseModel):
    """
    Immutable configuration loaded from a TOML or YAML file.

    Validation is never cached: :meth:`validate_config` runs again on every
    :meth:`get_credentials` call.
    """

    model_config = ConfigDict(frozen=True)

    credentials: AzureCredentials = Field(default_factory=AzureCredentials)
    location: str = Field(default="", description="Azure region, e.g. 'eastus'")

    def validate_config(self) -> None:
        """
        Check required fields and that a credential can be built from them.

        Raises:
            ValidationError: Wrapping a MissingFieldError or AuthError.
        """
        try:
            self.credentials.auth()
        except (ValidationError, AuthError) as exc:
            raise ValidationError(f"failed to validate credentials: {exc}") from exc

    def get_credentials(self) -> TokenCredential:
        """
        Validate, then build a new token credential.

        Returns:
            TokenCredential: A fresh, independent credential on every call.

        Raises:
            ValidationError: If the configuration is invalid.
            AuthError: If azure-identity rejects the inputs.
        """
        try:
            self.validate_config()
        except ValidationError as exc:
            raise ValidationError(f"error validating config: {exc}") from exc

        try:
            creds = self.credentials.auth()
        except AuthError as exc:
            raise AuthError(f"failed to get authentication token: {exc}") from exc

        logger.debug("Built credential for %r", self.credentials.name or "<unnamed>")
        return creds

    def get_async_credentials(self) -> AsyncTokenCredential:
        """Async variant of :meth:`get_credentials`; caller must close it."""
        try:
            self.validate_config()
        except ValidationError as exc:
            raise ValidationError(f"error validating config: {exc}") from exc

        try:
            return self.credentials.auth_async()
        except AuthError as exc:
            raise AuthError(f"failed to get authentication token: {exc}") from exc

    @property
    def management_scope(self) -> str:
        """Azure Resource Manager token scope for the configured cloud."""
        return self.credentials.client_options.cloud.management_scope


__all__ = ["Configuration"]
