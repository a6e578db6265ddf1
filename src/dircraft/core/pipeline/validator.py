from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted session options (CLI flags, GUI widgets,
persisted JSON) and the build engine. Coerces types, normalizes the
destination path and drops unknown keys.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from dircraft.domain.config import get_default_config
from dircraft.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["output_dir", "last_structure"]
_BOOL_FIELDS = ["skip_confirmation", "dry_run"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a session configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise TypeError on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        _reject("<session>", "dict", config, warnings, strict)
        logger.warning(warnings[-1])
        config = {}

    unknown = sorted(set(config) - set(defaults))
    warnings.extend(f"Unknown field '{key}' ignored." for key in unknown)

    clean: Dict[str, Any] = {}

    for field in _STRING_FIELDS:
        clean[field] = _as_str(config.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        clean[field] = _as_bool(config.get(field), defaults[field], field, warnings, strict)

    clean["output_dir"] = normalize_path(clean["output_dir"], os.getcwd())
    return clean, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

_BOOL_WORDS: Dict[str, bool] = {
    "true": True, "yes": True, "y": True, "on": True, "1": True,
    "false": False, "no": False, "n": False, "off": False, "0": False,
}


def _reject(field: str, expected: str, value: Any, warnings: List[str], strict: bool) -> None:
    """Raise in strict mode, otherwise record that the default was kept."""
    msg = f"Field '{field}' expects {expected}, got {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Default kept.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if not isinstance(value, str):
        _reject(field, "str", value, warnings, strict)
        return fallback
    # The diagram keeps its whitespace; a blank destination falls back
    if field == "output_dir":
        return value.strip() or fallback
    return value


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Accept real booleans; outside strict mode also 0/1 and yes/no words."""
    if value is None:
        return fallback
    if isinstance(value, bool):
        return value

    coerced: Optional[bool] = None
    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            coerced = bool(value)
        elif isinstance(value, str):
            coerced = _BOOL_WORDS.get(value.strip().lower())

    if coerced is None:
        _reject(field, "bool", value, warnings, strict)
        return fallback

    warnings.append(f"Field '{field}' coerced from {value!r} to {coerced}.")
    return coerced
