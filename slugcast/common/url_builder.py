"""Public short-link construction.

Behind a reverse proxy the request's own scheme and host describe the
internal hop, so X-Forwarded-Proto and X-Forwarded-Host win when both are
present. Without either, the configured BASE_URL is used.
"""

from typing import Mapping, Optional


def public_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Pick the scheme://host that short links should point at.

    Args:
        headers: Request headers (any key case)
        fallback_base_url: BASE_URL from configuration
        request_scheme: Scheme the request arrived on
        request_host: Host header of the request

    Returns:
        Base URL without a trailing slash
    """
    lowered = {name.lower(): value for name, value in headers.items()}
    proto = lowered.get("x-forwarded-proto")
    host = lowered.get("x-forwarded-host")

    if proto and host:
        return f"{proto}://{host}"
    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"
    return fallback_base_url.rstrip("/")


def build_short_url(slug: str, base_url: str, path_prefix: str = "") -> str:
    """Join base URL, optional path prefix and slug."""
    parts = [base_url.rstrip("/"), path_prefix.strip("/"), slug]
    return "/".join(part for part in parts if part)
