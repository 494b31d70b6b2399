"""
azconfig/models/__init__.py

Aggregate imports so these models can be accessed directly from this package.
"""

from azconfig.models.client_options import (
    AzureEnvironment,
    ClientOptions,
    CloudConfiguration,
    LoggingOptions,
    RetryOptions,
    TelemetryOptions,
    TransportOptions,
)
from azconfig.models.config import Configuration
from azconfig.models.credentials import AzureCredentials
from azconfig.models.settings import AzConfigSettings

__all__ = [
    "AzConfigSettings",
    "AzureCredentials",
    "AzureEnvironment",
    "ClientOptions",
    "CloudConfiguration",
    "Configuration",
    "LoggingOptions",
    "RetryOptions",
    "TelemetryOptions",
    "TransportOptions",
]
