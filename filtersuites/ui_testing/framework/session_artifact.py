"""
Session artifact helpers.

The artifact is Playwright's storage-state JSON:

    {
      "cookies": [{"name", "value", "domain", "path", "secure",
                   "httpOnly", "sameSite", ...}, ...],
      "origins": [{"origin": "...", "localStorage": [{"name", "value"}]}, ...]
    }

It is written once by the session bootstrap and then only read.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from .exceptions import SessionArtifactError


COOKIE_KEYS = ("name", "value", "domain", "path", "secure", "httpOnly", "sameSite")
ORIGIN_KEYS = ("origin", "localStorage")


def validate_session_artifact(data: Any, require_non_empty: bool = False) -> Dict[str, Any]:
    """
    Structural check of a parsed artifact.

    Args:
        data: Parsed JSON
        require_non_empty: Also require at least one cookie and one origin

    Returns:
        `data`, unchanged

    Raises:
        SessionArtifactError: On the first structural violation
    """
    if not isinstance(data, dict):
        raise SessionArtifactError("Session artifact must be a JSON object")

    for key in ("cookies", "origins"):
        if not isinstance(data.get(key), list):
            raise SessionArtifactError(f"Session artifact is missing a '{key}' array")
        if require_non_empty and not data[key]:
            raise SessionArtifactError(f"Session artifact has an empty '{key}' array")

    for i, cookie in enumerate(data["cookies"]):
        missing = [k for k in COOKIE_KEYS if not isinstance(cookie, dict) or k not in cookie]
        if missing:
            raise SessionArtifactError(f"Cookie #{i} is missing: {', '.join(missing)}")

    for i, origin in enumerate(data["origins"]):
        missing = [k for k in ORIGIN_KEYS if not isinstance(origin, dict) or k not in origin]
        if missing:
            raise SessionArtifactError(f"Origin #{i} is missing: {', '.join(missing)}")
        if not isinstance(origin["localStorage"], list):
            raise SessionArtifactError(f"Origin #{i} localStorage must be an array")

    return data


def load_session_artifact(path: Path, require_non_empty: bool = False) -> Dict[str, Any]:
    """Read and validate the artifact at `path`."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SessionArtifactError(f"Session artifact not found: {path}") from e
    except json.JSONDecodeError as e:
        raise SessionArtifactError(f"Session artifact is not valid JSON: {path} ({e})") from e

    return validate_session_artifact(data, require_non_empty=require_non_empty)


def summarize_session_artifact(data: Dict[str, Any]) -> Dict[str, List[Any]]:
    """Reporting view of an artifact: names and origins, never values."""
    return {
        "cookies": [
            {"name": c["name"], "domain": c["domain"], "path": c["path"]}
            for c in data.get("cookies", [])
        ],
        "origins": [
            {
                "origin": o["origin"],
                "localStorage": [item["name"] for item in o.get("localStorage", [])],
            }
            for o in data.get("origins", [])
        ],
    }


__all__ = [
    "load_session_artifact",
    "validate_session_artifact",
    "summarize_session_artifact",
]
