"""Configuration validation for toolscout.

Validates known configuration keys and warns on unknown ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from toolscout.core.logging import get_logger
from toolscout.core.models import HookSystem, PackageManager

LOGGER = get_logger(__name__)

# Valid top-level keys
VALID_TOP_LEVEL_KEYS: Set[str] = {
    "package_manager",
    "hook_system",
    "sync",
    "changesets",
}

VALID_SYNC_KEYS: Set[str] = {
    "source",
    "targets",
    "exclude",
}

VALID_CHANGESET_KEYS: Set[str] = {
    "directory",
}

VALID_PACKAGE_MANAGERS: Set[str] = {pm.value for pm in PackageManager}
VALID_HOOK_SYSTEMS: Set[str] = {hs.value for hs in HookSystem}


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate configuration dictionary.

    Does not raise exceptions - returns warnings instead.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(data, dict):
        warnings.append(ConfigValidationWarning(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
        ))
        return warnings

    for key in data.keys():
        if key not in VALID_TOP_LEVEL_KEYS:
            warnings.append(ConfigValidationWarning(
                message=f"Unknown top-level key '{key}'",
                source=source,
                key=key,
                suggestion=_suggest_key(key, VALID_TOP_LEVEL_KEYS),
            ))

    _check_choice(data, "package_manager", VALID_PACKAGE_MANAGERS, source, warnings)
    _check_choice(data, "hook_system", VALID_HOOK_SYSTEMS, source, warnings)

    sync = data.get("sync")
    if sync is not None:
        if not isinstance(sync, dict):
            warnings.append(ConfigValidationWarning(
                message=f"'sync' must be a mapping, got {type(sync).__name__}",
                source=source,
                key="sync",
            ))
        else:
            _check_section_keys(sync, "sync", VALID_SYNC_KEYS, source, warnings)
            if "source" in sync and not isinstance(sync["source"], str):
                warnings.append(ConfigValidationWarning(
                    message="'sync.source' must be a string",
                    source=source,
                    key="sync.source",
                ))
            for list_key in ("targets", "exclude"):
                value = sync.get(list_key)
                if value is not None and not isinstance(value, list):
                    warnings.append(ConfigValidationWarning(
                        message=f"'sync.{list_key}' must be a list, got {type(value).__name__}",
                        source=source,
                        key=f"sync.{list_key}",
                    ))

    changesets = data.get("changesets")
    if changesets is not None:
        if not isinstance(changesets, dict):
            warnings.append(ConfigValidationWarning(
                message=f"'changesets' must be a mapping, got {type(changesets).__name__}",
                source=source,
                key="changesets",
            ))
        else:
            _check_section_keys(changesets, "changesets", VALID_CHANGESET_KEYS, source, warnings)

    for warning in warnings:
        _log_warning(warning)

    return warnings


def _check_choice(
    data: Dict[str, Any],
    key: str,
    valid: Set[str],
    source: str,
    warnings: List[ConfigValidationWarning],
) -> None:
    value = data.get(key)
    if value is None:
        return
    if not isinstance(value, str):
        warnings.append(ConfigValidationWarning(
            message=f"'{key}' must be a string, got {type(value).__name__}",
            source=source,
            key=key,
        ))
    elif value.strip().lower().replace("_", "-") not in valid:
        warnings.append(ConfigValidationWarning(
            message=f"Invalid value '{value}' for '{key}'",
            source=source,
            key=key,
            suggestion=_suggest_key(value.strip().lower(), valid),
        ))


def _check_section_keys(
    section: Dict[str, Any],
    name: str,
    valid: Set[str],
    source: str,
    warnings: List[ConfigValidationWarning],
) -> None:
    for key in section.keys():
        if key not in valid:
            warnings.append(ConfigValidationWarning(
                message=f"Unknown key '{name}.{key}'",
                source=source,
                key=f"{name}.{key}",
                suggestion=_suggest_key(str(key), valid),
            ))


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo.

    Args:
        invalid_key: The invalid key entered.
        valid_keys: Set of valid keys.

    Returns:
        Closest matching valid key, or None if no good match.
    """
    matches = get_close_matches(invalid_key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    """Log a validation warning."""
    msg = f"{warning.message} in {warning.source}"
    if warning.suggestion:
        msg += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(msg)
