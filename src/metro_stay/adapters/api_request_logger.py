"""Optional logging of outgoing provider requests.

Enabled with METRO_STAY_LOG_REQUESTS=true. Credentials travel as query
parameters for ODPT and Rakuten, so those values are redacted.
"""

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_PARAMS = frozenset({"acl:consumerkey", "applicationid", "apikey", "key"})
REDACTED = "***REDACTED***"


def should_log_requests() -> bool:
    """Check whether METRO_STAY_LOG_REQUESTS is enabled."""
    return os.getenv("METRO_STAY_LOG_REQUESTS", "").lower() == "true"


def redact_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Copy query parameters with credential values replaced."""
    if not params:
        return {}
    return {k: REDACTED if k.lower() in SENSITIVE_PARAMS else v for k, v in params.items()}


def build_logged_url(url: str, params: dict[str, Any] | None) -> str:
    """Render a URL with its redacted, sorted query parameters."""
    safe_params = redact_params(params)
    if not safe_params:
        return url
    query = "&".join(f"{k}={v}" for k, v in sorted(safe_params.items()))
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def log_api_request(
    provider: str, method: str, url: str, params: dict[str, Any] | None = None
) -> None:
    """Log an outgoing request if request logging is enabled.

    Args:
        provider: Provider name (e.g., "odpt").
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters; credentials are redacted.
    """
    if not should_log_requests():
        return
    logger.info(f"{provider} request: {method} {build_logged_url(url, params)}")
