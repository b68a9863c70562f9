"""Server address normalization and endpoint construction."""

from typing import Optional

import httpx

DEFAULT_SERVER_URL = "http://localhost:8000"


def normalize_base_url(value: str) -> str:
    """
    Trim whitespace and trailing slashes from a server URL.

    Blank input falls back to the default local server address.
    """
    trimmed = value.strip()
    if not trimmed:
        return DEFAULT_SERVER_URL
    return trimmed.rstrip("/")


def validate_base_url(value: str) -> Optional[str]:
    """
    Check that a server URL parses as an absolute http(s) URL.

    Returns:
        An error message suitable for an interactive prompt, or None if valid.
    """
    normalized = normalize_base_url(value)
    try:
        url = httpx.URL(normalized)
    except (httpx.InvalidURL, TypeError, ValueError):
        return "Enter a valid URL"
    if url.scheme not in ("http", "https") or not url.host:
        return "Enter a valid URL"
    return None


def build_chat_endpoint(server_url: str, namespace: str, project: str) -> str:
    """Build the project base URL that OpenAI-compatible clients append paths to."""
    return f"{server_url}/v1/projects/{namespace}/{project}"
