"""
Tenant Credentials

One server process serves many shops. Each HTTP request carries the shop
domain and access token in headers; the stdio transport reads them from the
environment instead.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel

from .config import (
    ACCESS_TOKEN_HEADER,
    API_VERSION_HEADER,
    DEFAULT_API_VERSION,
    SHOP_DOMAIN_HEADER,
)
from .errors import CredentialsError

REQUIRED_HEADERS = [ACCESS_TOKEN_HEADER, SHOP_DOMAIN_HEADER]


class TenantCredentials(BaseModel):
    """Credentials for a single Shopify store."""

    shop_domain: str
    access_token: str
    api_version: str = DEFAULT_API_VERSION


def _lookup(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                value = candidate
                break
    if value is not None:
        value = value.strip()
    return value or None


def parse_tenant_credentials(headers: Mapping[str, str]) -> TenantCredentials:
    """
    Build credentials from request headers.

    Raises:
        CredentialsError: If the access token or shop domain is missing.
    """
    access_token = _lookup(headers, ACCESS_TOKEN_HEADER)
    shop_domain = _lookup(headers, SHOP_DOMAIN_HEADER)

    if not access_token or not shop_domain:
        raise CredentialsError(
            f"Missing required headers: {ACCESS_TOKEN_HEADER} and {SHOP_DOMAIN_HEADER}"
        )

    return TenantCredentials(
        shop_domain=shop_domain,
        access_token=access_token,
        api_version=_lookup(headers, API_VERSION_HEADER) or DEFAULT_API_VERSION,
    )


def credentials_from_env(environ: Mapping[str, str] | None = None) -> TenantCredentials:
    """Build credentials from SHOPIFY_* environment variables."""
    env = os.environ if environ is None else environ
    access_token = env.get("SHOPIFY_ACCESS_TOKEN")
    shop_domain = env.get("SHOPIFY_SHOP_DOMAIN")

    if not access_token or not shop_domain:
        raise CredentialsError(
            "SHOPIFY_ACCESS_TOKEN and SHOPIFY_SHOP_DOMAIN must be set"
        )

    return TenantCredentials(
        shop_domain=shop_domain,
        access_token=access_token,
        api_version=env.get("SHOPIFY_API_VERSION") or DEFAULT_API_VERSION,
    )
