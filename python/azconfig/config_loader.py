"""
azconfig/config_loader.py

Loads a credentials configuration file into a validated Configuration.

Usage example:
    from azconfig.config_loader import load_config
    from azconfig.errors import ConfigError

    try:
        config = load_config("config.toml")
        credential = config.get_credentials()
    except ConfigError as err:
        print(f"Bad config: {err}")

Supported formats are picked from the file suffix: ``.yaml`` / ``.yml`` are
read with PyYAML, anything else is treated as TOML.
"""

from __future__ import annotations

import logging
import os
import tomllib
from typing import Any, Dict, Literal, Optional

import aiofiles
import yaml

from azconfig.errors import DecodeError, ValidationError
from azconfig.models.config import Configuration
from azconfig.models.validator import validate_type

logger = logging.getLogger(__name__)

ConfigFormat = Literal["toml", "yaml"]

_YAML_SUFFIXES = (".yaml", ".yml")


def format_for_path(path: str) -> ConfigFormat:
    """Return the document format implied by the file suffix."""
    return "yaml" if path.lower().endswith(_YAML_SUFFIXES) else "toml"


def parse_config(
    text: str, fmt: ConfigFormat = "toml", *, path: Optional[str] = None
) -> Configuration:
    """
    Decode a configuration document without validating it.

    Args:
        text (str): The document contents.
        fmt (ConfigFormat): ``"toml"`` or ``"yaml"``.
        path (Optional[str]): Source path, used in error messages only.

    Returns:
        Configuration: The decoded (not yet validated) configuration.

    Raises:
        DecodeError: If the document is malformed or does not fit the schema.
    """
    where = path or "<string>"
    raw = _decode(text, fmt, path)
    try:
        return validate_type(raw, Configuration)
    except DecodeError as exc:
        raise DecodeError(f"error decoding config {where}: {exc}", path) from exc


def load_config(path: str) -> Configuration:
    """
    Read, decode and validate the configuration at ``path``.

    Raises:
        DecodeError: If the file is missing, unreadable or malformed.
        ValidationError: If the decoded configuration is invalid.
    """
    logger.debug("Loading config from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DecodeError(
            f"error decoding config: cannot read {path}: {exc}", path
        ) from exc

    return _validated(parse_config(text, format_for_path(path), path=path), path)


async def load_config_async(path: str) -> Configuration:
    """Same contract as :func:`load_config`, reading the file with aiofiles."""
    logger.debug("Loading config from %s (async)", path)
    try:
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            text = await f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DecodeError(
            f"error decoding config: cannot read {path}: {exc}", path
        ) from exc

    return _validated(parse_config(text, format_for_path(path), path=path), path)


def _decode(text: str, fmt: ConfigFormat, path: Optional[str]) -> Dict[str, Any]:
    where = path or "<string>"
    try:
        data = tomllib.loads(text) if fmt == "toml" else yaml.safe_load(text)
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise DecodeError(f"error decoding config {where}: {exc}", path) from exc

    # An empty YAML document decodes to None.
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DecodeError(
            f"error decoding config {where}: top level must be a table, "
            f"got {type(data).__name__}",
            path,
        )
    return data


def _validated(config: Configuration, path: str) -> Configuration:
    try:
        config.validate_config()
    except ValidationError as exc:
        raise ValidationError(f"error validating config {path}: {exc}") from exc

    if not config.location:
        logger.warning("Config %s has no location set", path)
    logger.debug(
        "Loaded config %s (credentials=%r, location=%r)",
        os.path.basename(path),
        config.credentials.name,
        config.location,
    )
    return config


__all__ = ["load_config", "load_config_async", "parse_config", "format_for_path"]
