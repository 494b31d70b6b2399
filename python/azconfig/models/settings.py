# azconfig/models/settings.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class AzConfigSettings(BaseSettings):
    """
    Process-level settings for the azconfig CLI.
    Fields map to environment variables prefixed with `AZCONFIG_`,
    e.g. `AZCONFIG_CONFIG_FILE`, `AZCONFIG_LOG_LEVEL`.
    """

    # If you set `AZCONFIG_CONFIG_FILE=/etc/azure/creds.toml`,
    # it becomes the default for --config.
    model_config = SettingsConfigDict(env_prefix="AZCONFIG_")

    config_file: str = "config.toml"
    log_level: str = "WARNING"
