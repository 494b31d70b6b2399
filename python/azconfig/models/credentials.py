"""
filename: azconfig/models/credentials.py

Provides the AzureCredentials pydantic model for the ``[credentials]`` table,
the required-field validator and the credential resolver built on it.
"""

from __future__ import annotations

from typing import Dict, Tuple

from azure.core.credentials import TokenCredential
from azure.core.credentials_async import AsyncTokenCredential
from pydantic import BaseModel, ConfigDict, Field

from azconfig.auth import build_async_credential, build_credential
from azconfig.errors import MissingFieldError, ValidationError
from azconfig.models.client_options import ClientOptions

# Checked in this order; the first empty one is reported.
REQUIRED_FIELDS: Tuple[str, ...] = (
    "tenant_id",
    "client_id",
    "subscription_id",
    "client_secret",
)


class AzureCredentials(BaseModel):
    """Service principal credentials plus the client options to use them with.

    Identity fields default to empty strings so that an absent key is reported
    by :meth:`validate_fields` rather than by the decoder.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Display name for this credential")
    description: str = Field(default="", description="Free-form description")

    tenant_id: str = Field(default="", description="Azure Tenant ID")
    client_id: str = Field(default="", description="Azure Client ID")
    subscription_id: str = Field(default="", description="Azure Subscription ID")
    client_secret: str = Field(
        default="", description="Azure Client Secret", repr=False
    )
    client_options: ClientOptions = Field(
        default_factory=ClientOptions,
        description="Cloud selection and transport options for the credential",
    )

    def validate_fields(self) -> None:
        """Check that every required identity field is non-empty.

        Raises:
            MissingFieldError: Naming the first empty field.
        """
        missing = next(
            (field for field in REQUIRED_FIELDS if not getattr(self, field)), None
        )
        if missing is not None:
            raise MissingFieldError(missing)

    def auth(self) -> TokenCredential:
        """Re-validate and build a new client-secret credential.

        Raises:
            ValidationError: If a required field is empty.
            AuthError: If azure-identity rejects the inputs.
        """
        self._revalidate()
        return build_credential(
            self.tenant_id,
            self.client_id,
            self.client_secret,
            self.client_options.to_credential_kwargs(),
        )

    def auth_async(self) -> AsyncTokenCredential:
        """Like :meth:`auth`, but returns an ``azure.identity.aio`` credential."""
        self._revalidate()
        return build_async_credential(
            self.tenant_id,
            self.client_id,
            self.client_secret,
            self.client_options.to_credential_kwargs(),
        )

    def to_env_dict(self) -> Dict[str, str]:
        """Converts Azure credentials to environment variables.

        Returns:
            Dict[str, str]: A dictionary containing ARM_* environment variables.
        """
        return {
            "ARM_CLIENT_ID": self.client_id,
            "ARM_CLIENT_SECRET": self.client_secret,
            "ARM_TENANT_ID": self.tenant_id,
            "ARM_SUBSCRIPTION_ID": self.subscription_id,
        }

    def _revalidate(self) -> None:
        try:
            self.validate_fields()
        except MissingFieldError as exc:
            raise ValidationError(f"validating credentials: {exc}") from exc


__all__ = ["AzureCredentials", "REQUIRED_FIELDS"]
