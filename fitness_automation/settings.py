from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .mobile.env import ensure_dotenv_loaded, repo_root

DEFAULT_APPIUM_SERVER_URL = "http://127.0.0.1:4723"
DEFAULT_GATEWAY_URL = "http://localhost:8080"
DEFAULT_BUNDLE_ID = "com.xqfitness.app"
DEFAULT_CAPABILITIES_PATH = "config/ios_capabilities.example.json"

WRITE_SERVICE_PATH = "/xq-fitness-write-service/api/v1"
READ_SERVICE_PATH = "/xq-fitness-read-service/api/v1"


def _as_bool(raw: Optional[str]) -> bool:
    return (raw or "").strip().lower() in {"1", "true", "yes", "on"}


def _as_non_negative_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got: {raw!r}") from e
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got: {raw!r}")
    return value


@dataclass(frozen=True)
class SuiteSettings:
    appium_server_url: str
    capabilities_path: Path
    bundle_id: str
    gateway_url: str
    artifacts_dir: Path
    debug: bool = False
    timeout_scale: float = 1.0
    pause_scale: float = 1.0

    @property
    def write_service_url(self) -> str:
        return f"{self.gateway_url}{WRITE_SERVICE_PATH}"

    @property
    def read_service_url(self) -> str:
        return f"{self.gateway_url}{READ_SERVICE_PATH}"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> SuiteSettings:
        """
        Build settings from environment variables.

        When `env` is omitted the repo-root .env is loaded first and os.environ
        is read; relative paths resolve against the repo root.
        """
        if env is None:
            ensure_dotenv_loaded()
            env = os.environ

        root = repo_root()
        capabilities_path = Path(env.get("FITNESS_CAPABILITIES_PATH") or DEFAULT_CAPABILITIES_PATH)
        artifacts_dir = Path(env.get("FITNESS_ARTIFACTS_DIR") or "artifacts")

        return cls(
            appium_server_url=(env.get("APPIUM_SERVER_URL") or DEFAULT_APPIUM_SERVER_URL).rstrip("/"),
            capabilities_path=capabilities_path if capabilities_path.is_absolute() else root / capabilities_path,
            bundle_id=env.get("FITNESS_BUNDLE_ID") or DEFAULT_BUNDLE_ID,
            gateway_url=(env.get("GATEWAY_URL") or DEFAULT_GATEWAY_URL).rstrip("/"),
            artifacts_dir=artifacts_dir if artifacts_dir.is_absolute() else root / artifacts_dir,
            debug=_as_bool(env.get("DEBUG")),
            timeout_scale=_as_non_negative_float(env, "FITNESS_TIMEOUT_SCALE", 1.0),
            pause_scale=_as_non_negative_float(env, "FITNESS_PAUSE_SCALE", 1.0),
        )
