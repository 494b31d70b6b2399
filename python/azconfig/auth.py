"""
azconfig/auth.py

Builds azure-identity client-secret credentials from validated fields.

Constructing a credential performs no network I/O; tokens are acquired lazily
by the credential on its first ``get_token`` call. Each call here returns a
brand-new credential object.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from azure.core.credentials import TokenCredential
from azure.core.credentials_async import AsyncTokenCredential
from azure.identity import ClientSecretCredential
from azure.identity.aio import ClientSecretCredential as AsyncClientSecretCredential

from azconfig.errors import AuthError

logger = logging.getLogger(__name__)


def build_credential(
    tenant_id: str,
    client_id: str,
    client_secret: str,
    options: Dict[str, Any],
) -> TokenCredential:
    """Create a synchronous ``ClientSecretCredential``.

    Args:
        tenant_id (str): Microsoft Entra tenant ID.
        client_id (str): Application (client) ID of the service principal.
        client_secret (str): Client secret of the service principal.
        options (Dict[str, Any]): Constructor keyword arguments, usually from
            ``ClientOptions.to_credential_kwargs()``.

    Returns:
        TokenCredential: A credential usable by any Azure SDK client.

    Raises:
        AuthError: If azure-identity rejects the inputs.
    """
    logger.debug(
        "Creating client secret credential for tenant=%s client=%s options=%s",
        tenant_id,
        client_id,
        sorted(options),
    )
    try:
        return ClientSecretCredential(tenant_id, client_id, client_secret, **options)
    except (ValueError, TypeError) as exc:
        raise AuthError(f"failed to create client secret credential: {exc}") from exc


def build_async_credential(
    tenant_id: str,
    client_id: str,
    client_secret: str,
    options: Dict[str, Any],
) -> AsyncTokenCredential:
    """Async twin of :func:`build_credential` (aiohttp transport).

    The caller owns the returned credential and should close it, e.g. with
    ``async with credential:``.
    """
    logger.debug(
        "Creating async client secret credential for tenant=%s client=%s",
        tenant_id,
        client_id,
    )
    try:
        return AsyncClientSecretCredential(
            tenant_id, client_id, client_secret, **options
        )
    except (ValueError, TypeError) as exc:
        raise AuthError(f"failed to create client secret credential: {exc}") from exc


__all__ = ["build_credential", "build_async_credential"]
