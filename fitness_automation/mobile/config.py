from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def load_json_file(path: str | Path) -> dict[str, Any]:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"JSON file not found: {file_path}")
    if file_path.is_dir():
        raise IsADirectoryError(f"Expected a JSON file but found a directory: {file_path}")

    raw = file_path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Expected top-level JSON object in {file_path}")
    return data


def require_key(obj: dict[str, Any], key: str, *, context: str) -> Any:
    if key not in obj:
        raise ValueError(f"Missing required key '{key}' in {context}")
    return obj[key]


def load_capabilities(path: str | Path) -> dict[str, Any]:
    """
    Load a WebDriver new-session payload for the app under test.

    The file must hold {"capabilities": {"alwaysMatch": {...}, ...}}; nothing is
    defaulted so a wrong device or bundle id fails at session creation, not later.
    """
    payload = load_json_file(path)
    capabilities = require_key(payload, "capabilities", context=str(path))
    if not isinstance(capabilities, dict):
        raise ValueError(f"'capabilities' must be an object in {path}")
    return payload
