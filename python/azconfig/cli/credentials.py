#!/usr/bin/env python3
"""
azconfig/cli/credentials.py

Command line checks for an azconfig credentials file.

Usage example:
  python -m azconfig.cli.credentials validate --config config.toml
  python -m azconfig.cli.credentials env --config config.toml --export
  python -m azconfig.cli.credentials token --config config.toml

`validate` and `env` never contact Azure. `token` acquires a real token for
the configured cloud's Resource Manager scope (or --scope) and prints when it
expires. The client secret is never printed except by `env`.
"""

import argparse
import asyncio
import datetime
import logging
import shlex
import sys
from typing import NoReturn

from azconfig.config_loader import load_config, load_config_async
from azconfig.models.settings import AzConfigSettings

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def main() -> NoReturn:
    """
    Entry point for the azconfig CLI.
    """
    settings = AzConfigSettings()

    parser = argparse.ArgumentParser(
        prog="azconfig",
        description="Validate an Azure credentials config and build credentials from it.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"Logging level (default: {settings.log_level}, env AZCONFIG_LOG_LEVEL).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Load and validate the config, building a credential without network calls.",
    )
    env_parser = subparsers.add_parser(
        "env",
        help="Print ARM_* environment variables for Terraform and the Azure CLI.",
    )
    env_parser.add_argument(
        "--export",
        action="store_true",
        default=False,
        help="Prefix each line with 'export ' for shell eval.",
    )
    token_parser = subparsers.add_parser(
        "token",
        help="Acquire an access token to prove the credentials work.",
    )
    token_parser.add_argument(
        "--scope",
        default=None,
        help="Token scope (default: Resource Manager scope of the configured cloud).",
    )

    for sub in (validate_parser, env_parser, token_parser):
        sub.add_argument(
            "--config",
            default=settings.config_file,
            help=f"Path to the TOML/YAML config (default: {settings.config_file}, "
            "env AZCONFIG_CONFIG_FILE).",
        )

    validate_parser.set_defaults(func=_validate)
    env_parser.set_defaults(func=_env)
    token_parser.set_defaults(func=_token)

    args = parser.parse_args()

    try:
        _configure_logging(args.log_level)
        asyncio.run(args.func(args))
    except Exception as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    else:
        sys.exit(0)


def _configure_logging(level: str) -> None:
    """
    Configure root logging. Levels from AZCONFIG_LOG_LEVEL bypass argparse choices.
    """
    if level not in LOG_LEVELS:
        raise ValueError(
            f"unknown log level '{level}' (choose from {', '.join(LOG_LEVELS)})"
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def _validate(args: argparse.Namespace) -> None:
    """
    Load the config, which validates it, then print a redacted summary.
    """
    config = load_config(args.config)
    creds = config.credentials
    print(
        f"OK: {args.config} name={creds.name or '-'} tenant={creds.tenant_id} "
        f"client={creds.client_id} subscription={creds.subscription_id} "
        f"cloud={creds.client_options.cloud.environment.value} "
        f"location={config.location or '-'}"
    )


async def _env(args: argparse.Namespace) -> None:
    """
    Print the credentials as ARM_* variables, one per line.
    """
    config = load_config(args.config)
    prefix = "export " if args.export else ""
    for key, value in config.credentials.to_env_dict().items():
        print(f"{prefix}{key}={shlex.quote(value)}")


async def _token(args: argparse.Namespace) -> None:
    """
    Acquire a token with the async credential and report its expiry.
    """
    config = await load_config_async(args.config)
    scope = args.scope or config.management_scope
    logger.info("Requesting token for scope %s", scope)

    async with config.get_async_credentials() as credential:
        token = await credential.get_token(scope)

    expires = datetime.datetime.fromtimestamp(token.expires_on, tz=datetime.timezone.utc)
    print(f"OK: token for {scope} expires at {expires.isoformat()}")


if __name__ == "__main__":
    main()
