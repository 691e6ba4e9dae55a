from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

_DOTENV_LOADED = False


def repo_root() -> Path:
    # fitness_automation/mobile/env.py -> repo root is two levels up
    return Path(__file__).resolve().parents[2]


def parse_dotenv(text: str) -> dict[str, str]:
    """
    Parse KEY=VALUE lines.

    Blank lines and '#' comments are skipped, a leading 'export ' is allowed and
    matching single or double quotes around the value are stripped.
    """
    parsed: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        parsed[key] = value
    return parsed


def load_dotenv(*, path: Optional[str | Path] = None, override: bool = False) -> dict[str, str]:
    """
    Load a .env file into os.environ (repo root by default).

    Existing variables win unless override=True. Returns the keys that were set.
    """
    dotenv_path = Path(path).expanduser().resolve() if path is not None else (repo_root() / ".env")
    if not dotenv_path.exists():
        return {}
    if dotenv_path.is_dir():
        raise RuntimeError(f".env path is a directory: {dotenv_path}")

    loaded: dict[str, str] = {}
    for key, value in parse_dotenv(dotenv_path.read_text(encoding="utf-8")).items():
        if not override and os.environ.get(key) is not None:
            continue
        os.environ[key] = value
        loaded[key] = value
    return loaded


def ensure_dotenv_loaded() -> dict[str, str]:
    """
    Load repo-root .env exactly once per process.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return {}
    loaded = load_dotenv()
    _DOTENV_LOADED = True
    return loaded
