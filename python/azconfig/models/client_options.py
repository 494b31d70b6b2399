"""
filename: azconfig/models/client_options.py

Pydantic models for the ``[credentials.client_options]`` table.

These select which Azure cloud the credential authenticates against (public,
China, US Government or a custom authority such as Azure Stack) and carry the
azure-core pipeline settings (retry, timeouts, proxies, telemetry, logging)
that are handed to the credential constructor.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from azure.identity import AzureAuthorityHosts
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from azconfig.errors import ConfigError

logger = logging.getLogger(__name__)


class AzureEnvironment(str, Enum):
    public = "public"
    china = "china"
    government = "government"
    custom = "custom"


# Authority host and Azure Resource Manager endpoint per named cloud.
AUTHORITY_HOSTS: Dict[AzureEnvironment, str] = {
    AzureEnvironment.public: AzureAuthorityHosts.AZURE_PUBLIC_CLOUD,
    AzureEnvironment.china: AzureAuthorityHosts.AZURE_CHINA,
    AzureEnvironment.government: AzureAuthorityHosts.AZURE_GOVERNMENT,
}

RESOURCE_MANAGER_ENDPOINTS: Dict[AzureEnvironment, str] = {
    AzureEnvironment.public: "https://management.azure.com",
    AzureEnvironment.china: "https://management.chinacloudapi.cn",
    AzureEnvironment.government: "https://management.usgovcloudapi.net",
}


class CloudConfiguration(BaseModel):
    """Which Azure cloud to authenticate against."""

    model_config = ConfigDict(frozen=True)

    environment: AzureEnvironment = Field(
        default=AzureEnvironment.public, description="Named Azure cloud"
    )
    authority_host: Optional[str] = Field(
        default=None, description="Microsoft Entra authority host override"
    )
    resource_manager_endpoint: Optional[str] = Field(
        default=None, description="Azure Resource Manager endpoint override"
    )

    @field_validator("authority_host", "resource_manager_endpoint")
    @classmethod
    def strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().rstrip("/")
        return value or None

    @model_validator(mode="after")
    def check_custom_cloud(self) -> CloudConfiguration:
        """
        A custom cloud has no well-known authority, so one must be given.
        """
        if self.environment is AzureEnvironment.custom and not self.authority_host:
            raise ValueError("environment 'custom' requires authority_host")
        return self

    @property
    def effective_authority_host(self) -> str:
        if self.authority_host:
            return self.authority_host
        return AUTHORITY_HOSTS[self.environment]

    @property
    def effective_resource_manager_endpoint(self) -> str:
        """
        Raises:
            ConfigError: For a custom cloud without resource_manager_endpoint.
        """
        if self.resource_manager_endpoint:
            return self.resource_manager_endpoint
        if self.environment is AzureEnvironment.custom:
            raise ConfigError(
                "custom cloud has no resource_manager_endpoint; "
                "set it in client_options.cloud or pass an explicit scope"
            )
        return RESOURCE_MANAGER_ENDPOINTS[self.environment]

    @property
    def management_scope(self) -> str:
        """Token scope for Azure Resource Manager in this cloud."""
        return f"{self.effective_resource_manager_endpoint}/.default"


class RetryOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_retries: Optional[int] = Field(default=None, ge=0)
    retry_delay: Optional[float] = Field(default=None, ge=0)
    max_retry_delay: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_delays(self) -> RetryOptions:
        if (
            self.retry_delay is not None
            and self.max_retry_delay is not None
            and self.max_retry_delay < self.retry_delay
        ):
            raise ValueError("max_retry_delay must not be smaller than retry_delay")
        return self

    def to_kwargs(self) -> Dict[str, Any]:
        pairs = {
            "retry_total": self.max_retries,
            "retry_backoff_factor": self.retry_delay,
            "retry_backoff_max": self.max_retry_delay,
        }
        return {key: value for key, value in pairs.items() if value is not None}


class TransportOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    connection_timeout: Optional[float] = Field(default=None, gt=0)
    read_timeout: Optional[float] = Field(default=None, gt=0)
    # Stored as (scheme, url) pairs so the frozen model stays immutable.
    proxies: Tuple[Tuple[str, str], ...] = ()

    @field_validator("proxies", mode="before")
    @classmethod
    def proxies_from_table(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(sorted(value.items()))
        return value

    def to_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if self.connection_timeout is not None:
            kwargs["connection_timeout"] = self.connection_timeout
        if self.read_timeout is not None:
            kwargs["read_timeout"] = self.read_timeout
        if self.proxies:
            kwargs["proxies"] = dict(self.proxies)
        return kwargs


class TelemetryOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    application_id: Optional[str] = None
    disabled: bool = False

    def to_kwargs(self) -> Dict[str, Any]:
        if self.disabled or not self.application_id:
            return {}
        return {"user_agent": self.application_id}


class LoggingOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool = False

    def to_kwargs(self) -> Dict[str, Any]:
        return {"logging_enable": True} if self.enabled else {}


class ClientOptions(BaseModel):
    """
    Options applied to the client-secret credential.

    Every table is optional; an empty ``client_options`` leaves all SDK
    defaults in place and targets the public Azure cloud.
    """

    model_config = ConfigDict(frozen=True)

    cloud: CloudConfiguration = Field(default_factory=CloudConfiguration)
    retry: RetryOptions = Field(default_factory=RetryOptions)
    transport: TransportOptions = Field(default_factory=TransportOptions)
    telemetry: TelemetryOptions = Field(default_factory=TelemetryOptions)
    logging: LoggingOptions = Field(default_factory=LoggingOptions)
    disable_instance_discovery: bool = False
    additionally_allowed_tenants: Tuple[str, ...] = ()

    def to_credential_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``ClientSecretCredential``.

        Options left unset are omitted so the SDK applies its own defaults.

        Returns:
            Dict[str, Any]: Constructor keyword arguments.
        """
        kwargs: Dict[str, Any] = {}
        if (
            self.cloud.environment is not AzureEnvironment.public
            or self.cloud.authority_host
        ):
            kwargs["authority"] = self.cloud.effective_authority_host
        if self.disable_instance_discovery:
            kwargs["disable_instance_discovery"] = True
        if self.additionally_allowed_tenants:
            kwargs["additionally_allowed_tenants"] = list(
                self.additionally_allowed_tenants
            )
        if self.telemetry.disabled and self.telemetry.application_id:
            logger.debug(
                "Telemetry disabled; ignoring application_id %r",
                self.telemetry.application_id,
            )

        kwargs.update(self.retry.to_kwargs())
        kwargs.update(self.transport.to_kwargs())
        kwargs.update(self.telemetry.to_kwargs())
        kwargs.update(self.logging.to_kwargs())
        return kwargs


__all__ = [
    "AzureEnvironment",
    "CloudConfiguration",
    "RetryOptions",
    "TransportOptions",
    "TelemetryOptions",
    "LoggingOptions",
    "ClientOptions",
]
