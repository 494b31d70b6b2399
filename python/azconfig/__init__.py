"""
azconfig

Loads Azure service principal settings from a TOML or YAML file and builds
azure-identity token credentials from them.
"""

from azconfig.config_loader import load_config, load_config_async, parse_config
from azconfig.errors import (
    AuthError,
    ConfigError,
    DecodeError,
    MissingFieldError,
    ValidationError,
)
from azconfig.models import AzureCredentials, ClientOptions, Configuration

__all__ = [
    "AuthError",
    "AzureCredentials",
    "ClientOptions",
    "ConfigError",
    "Configuration",
    "DecodeError",
    "MissingFieldError",
    "ValidationError",
    "load_config",
    "load_config_async",
    "parse_config",
]
