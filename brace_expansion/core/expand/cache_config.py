from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from brace_expansion.core.errors import ConfigValidationError


DEFAULT_CAPACITIES: dict[str, int] = {
    # top-level expand() results
    "results": 500,
    # split_comma_parts() results; bodies repeat less than patterns
    "comma_parts": 250,
    # recursive sub-expansions; deep nesting produces many keys
    "sub_expansions": 750,
}


@dataclass(frozen=True)
class CacheConfig:
    results: int = DEFAULT_CAPACITIES["results"]
    comma_parts: int = DEFAULT_CAPACITIES["comma_parts"]
    sub_expansions: int = DEFAULT_CAPACITIES["sub_expansions"]

    def as_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def validate_config(
    raw: dict[str, Any], *, file: str | None = None
) -> tuple[CacheConfig | None, list[ConfigValidationError]]:
    """Validate a raw capacity mapping and merge it over the defaults.

    Returns (config, []) on success, or (None, errors) listing every problem.
    Missing keys keep their default value.
    """
    errors: list[ConfigValidationError] = []
    overrides: dict[str, int] = {}

    for key, value in raw.items():
        if key not in DEFAULT_CAPACITIES:
            errors.append(
                ConfigValidationError(
                    code="E_CONFIG_UNKNOWN_KEY",
                    message=f"unknown key: {key} (choose from: {', '.join(DEFAULT_CAPACITIES)})",
                    file=file,
                    path=str(key),
                )
            )
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            errors.append(
                ConfigValidationError(
                    code="E_CONFIG_INVALID_CAPACITY",
                    message=f"capacity must be an integer >= 1, got {value!r}",
                    file=file,
                    path=key,
                )
            )
            continue
        overrides[key] = value

    if errors:
        return None, errors
    return replace(CacheConfig(), **overrides), []
