"""Process-wide settings, read once at startup."""
from __future__ import annotations
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

API_KEY_ENV = "OPENAI_API_KEY"
CONFIG_PATH_ENV = "AI_TEXT_TOOLS_CONFIG"

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_SYSTEM_PROMPT = "You are a helpful text-processing assistant."


class ConfigError(Exception):
    """Settings could not be assembled."""


@dataclass(frozen=True)
class Settings:
    api_key: str
    api_url: str = OPENAI_CHAT_URL
    model: str = DEFAULT_MODEL
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    timeout: float | None = None
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return data


def load_settings(cfg_path: str | None = None, environ: dict[str, str] | None = None) -> Settings:
    """
    Build Settings from the environment and an optional YAML file.

    The API key only ever comes from the environment. The YAML file may
    override any other field.

    Args:
        cfg_path: YAML config path; falls back to $AI_TEXT_TOOLS_CONFIG.
        environ: Environment mapping, defaults to os.environ.

    Raises:
        ConfigError: API key missing, config file missing or malformed.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV, "")
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV} env var is required")

    settings = Settings(api_key=api_key)

    path = cfg_path or env.get(CONFIG_PATH_ENV)
    if not path:
        return settings
    if not Path(path).exists():
        raise ConfigError(f"config file not found at {path}")

    cfg = load_cfg(path)
    allowed = {f.name for f in fields(Settings)} - {"api_key"}
    unknown = sorted(set(cfg) - allowed)
    if unknown:
        raise ConfigError(f"{path}: unknown keys {', '.join(unknown)}")

    overrides: dict[str, Any] = {}
    try:
        for key, value in cfg.items():
            if key == "port":
                overrides[key] = int(value)
            elif key == "timeout":
                overrides[key] = None if value is None else float(value)
            else:
                overrides[key] = str(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{path}: invalid value for {key}: {e}") from e
    return replace(settings, **overrides)
