"""Configuration constants and .env parsing."""

from __future__ import annotations

import codecs
import os
from pathlib import Path


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Parse .env file and return values for requested keys.

    Does NOT load into os.environ; callers decide what to do with values.
    """
    env_file = Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_idx = trimmed.find("=")
        if eq_idx == -1:
            continue
        key = trimmed[:eq_idx].strip()
        if key not in wanted:
            continue
        value = trimmed[eq_idx + 1 :].strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def _setting(name: str, default: str, env_config: dict[str, str]) -> str:
    return os.environ.get(name) or env_config.get(name, default)


def parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Read config values from .env (falls back to os.environ).
_env_config = read_env_file(["TREESHIFT_ENCODING", "TREESHIFT_PRESERVE_METADATA", "TREESHIFT_LOG_LEVEL"])

# Encoding expected of the raw C strings handed to the boundary entry points.
ENCODING: str = codecs.lookup(_setting("TREESHIFT_ENCODING", "utf-8", _env_config)).name

# shutil.copy2 (content, mode, timestamps) when true, shutil.copy (content, mode) otherwise.
PRESERVE_METADATA: bool = parse_bool(_setting("TREESHIFT_PRESERVE_METADATA", "true", _env_config))

LOG_LEVEL: str = (
    os.environ.get("TREESHIFT_LOG_LEVEL")
    or os.environ.get("LOG_LEVEL")
    or _env_config.get("TREESHIFT_LOG_LEVEL", "INFO")
).upper()
