"""Helpers for working out which GitHub deployment an endpoint belongs to."""

from __future__ import annotations

from typing import Iterable, Optional
from urllib.parse import urlsplit

from base_models import Credential
from impl.config import DOTCOM_API_ENDPOINT


DOTCOM_HTML_URL = "https://github.com"


def get_dotcom_api_endpoint() -> str:
    """Get github.com's API endpoint."""
    return DOTCOM_API_ENDPOINT


def get_html_url(endpoint: str) -> str:
    """Get the URL for the HTML site.

        https://api.github.com -> https://github.com
        https://github.mycompany.com/api/v3 -> https://github.mycompany.com

    Only the scheme and hostname survive; port, path and query are dropped.
    Strings that don't parse as URLs are not rejected: missing parts come
    back empty (``"not a url"`` -> ``"://"``).
    """
    if endpoint == get_dotcom_api_endpoint():
        # github.com serves its API from a subdomain, the site from the parent domain
        return DOTCOM_HTML_URL

    parsed = urlsplit(endpoint)
    return f"{parsed.scheme}://{parsed.hostname or ''}"


def get_user_for_endpoint(credentials: Iterable[Credential], endpoint: str) -> Optional[Credential]:
    """Return the first credential whose endpoint is exactly ``endpoint``, or None."""
    return next((c for c in credentials if c.endpoint == endpoint), None)
