"""
Shared validators for input sanitization and security.

Used by the pydantic schemas (field validators raise ValueError, which
FastAPI reports as a 400) and by the services before persisting.
"""

import re
from urllib.parse import urlparse
from typing import Optional

from shared.config.constants import EntityStatus, ErrorMessages, Limits

# Internal hosts that must never appear in a stored image URL (SSRF prevention)
BLOCKED_HOSTS = [
    "localhost",
    "127.0.0.1",
    "0.0.0.0",
    "10.",
    "192.168.",
    "169.254.",  # Link-local, cloud metadata
    "::1",
    "metadata.google",
] + [f"172.{octet}." for octet in range(16, 32)]

BLOCKED_SCHEMES = {"javascript", "data", "file", "ftp", "mailto", "tel"}

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def validate_image_url(url: Optional[str]) -> Optional[str]:
    """
    Validate a logo/image URL.

    Args:
        url: The URL to validate (can be None)

    Returns:
        The stripped URL, or None when empty

    Raises:
        ValueError: If the URL is invalid or points at an internal host
    """
    if url is None:
        return None
    if not isinstance(url, str):
        raise ValueError("URL must be a string")

    url = url.strip()
    if not url:
        return None

    if len(url) > Limits.MAX_URL_LENGTH:
        raise ValueError(f"URL too long (max {Limits.MAX_URL_LENGTH} characters)")

    parsed = urlparse(url)

    scheme = parsed.scheme.lower()
    if scheme in BLOCKED_SCHEMES:
        raise ValueError(f"URL scheme not allowed: {scheme}")
    if scheme not in ("http", "https"):
        raise ValueError("Only HTTP/HTTPS URLs are allowed")

    host = (parsed.hostname or "").lower()
    if not host:
        raise ValueError("URL has no valid host")

    for blocked in BLOCKED_HOSTS:
        if host.startswith(blocked):
            raise ValueError("Internal URLs are not allowed")

    return url


def validate_status(status: Optional[str]) -> Optional[str]:
    """Check a status value against EntityStatus.ALL (None passes through)."""
    if status is None:
        return None
    if status not in EntityStatus.ALL:
        raise ValueError(
            ErrorMessages.INVALID_STATUS.format(allowed=", ".join(EntityStatus.ALL))
        )
    return status


def sanitize_text(value: Optional[str]) -> Optional[str]:
    """
    Trim whitespace and strip control characters.

    Returns None unchanged; blank input becomes "" so callers can tell
    "not sent" apart from "sent empty".
    """
    if value is None:
        return None
    return _CONTROL_CHARS.sub("", value).strip()


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Treat empty/whitespace-only strings as absent."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value
