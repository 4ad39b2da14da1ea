"""Request headers shared by the GitHub adapters."""

from __future__ import annotations

USER_AGENT = "discussion-tools/1.0"


def api_headers(token: str | None) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers
