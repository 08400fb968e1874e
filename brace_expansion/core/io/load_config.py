from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable

import yaml

from brace_expansion.core.errors import ConfigLoadError, ConfigValidationError
from brace_expansion.core.expand.cache_config import CacheConfig, validate_config


CONFIG_ENV_VAR = "BRACE_EXPANSION_CONFIG"

# suffix -> (parser, error code for unparseable text)
_PARSERS: dict[str, tuple[Callable[[str], Any], str]] = {
    ".yaml": (yaml.safe_load, "E_YAML_PARSE"),
    ".yml": (yaml.safe_load, "E_YAML_PARSE"),
    ".json": (lambda text: json.loads(text) if text.strip() else None, "E_JSON_PARSE"),
}


def load_config_file(path: str) -> dict[str, Any]:
    """Read a YAML/JSON capacity file into its raw mapping.

    An empty document gives {}. Keys and values are left to validate_config.
    """
    p = Path(path)
    parser = _PARSERS.get(p.suffix.lower())
    if parser is None:
        raise ConfigLoadError(
            code="E_UNSUPPORTED_FORMAT",
            message=f"unsupported suffix {p.suffix!r}; use one of: {', '.join(_PARSERS)}",
            file=str(p),
        )
    parse, parse_error_code = parser

    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigLoadError(code="E_FILE_NOT_FOUND", message="file does not exist", file=str(p)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(code="E_FILE_READ", message=str(e), file=str(p)) from e

    try:
        data = parse(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigLoadError(code=parse_error_code, message=str(e), file=str(p)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            code="E_INVALID_TOP_LEVEL",
            message=f"expected a mapping of capacities, got {type(data).__name__}",
            file=str(p),
        )
    return data


def resolve_config_path(config_path: str | None) -> str | None:
    if config_path:
        return config_path
    return os.getenv(CONFIG_ENV_VAR) or None


def load_and_validate(
    config_path: str | None,
) -> tuple[CacheConfig | None, list[ConfigValidationError]]:
    """Resolve, read and validate the capacity config.

    The path falls back to $BRACE_EXPANSION_CONFIG; with neither set the
    defaults are returned. Unreadable files raise ConfigLoadError; bad keys
    and values come back as (None, errors), all of them at once.
    """
    path = resolve_config_path(config_path)
    if path is None:
        return CacheConfig(), []
    return validate_config(load_config_file(path), file=path)
