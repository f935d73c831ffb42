"""Debug logging of outgoing geodata requests.

Enabled with ``TRAVEL_CHECKIN_LOG_REQUESTS=true``.
"""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "TRAVEL_CHECKIN_LOG_REQUESTS"
MAX_BODY_LOG_CHARS = 1000


def should_log_requests() -> bool:
    """Check whether request logging is switched on."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def _with_query(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def _format_body(body: Any) -> str:
    if isinstance(body, dict):
        try:
            text = json.dumps(body, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            text = str(body)
    else:
        text = str(body)
    if len(text) > MAX_BODY_LOG_CHARS:
        return f"{text[:MAX_BODY_LOG_CHARS]}... ({len(text)} chars)"
    return text


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    body: Any = None,
) -> None:
    """Log an outgoing request when request logging is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters.
        body: Form or JSON body, truncated in the log.
    """
    if not should_log_requests():
        return

    lines = [f"{method} {_with_query(url, params)}"]
    if body is not None:
        lines.append(f"Body: {_format_body(body)}")

    logger.info("API Request:\n" + "\n".join(lines))
