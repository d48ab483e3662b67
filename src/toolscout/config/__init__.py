"""Configuration module for toolscout.

Provides configuration file loading, parsing, and validation with support for:
- Project-level config (.toolscout.yml)
- Global config ($TOOLSCOUT_HOME/config.yml)
- Environment variable expansion
"""

from toolscout.config.models import (
    ChangesetConfig,
    SyncConfig,
    ToolscoutConfig,
)
from toolscout.config.loader import (
    ConfigError,
    find_global_config,
    find_project_config,
    load_config,
)
from toolscout.config.validation import validate_config, ConfigValidationWarning

__all__ = [
    "ChangesetConfig",
    "SyncConfig",
    "ToolscoutConfig",
    "ConfigError",
    "load_config",
    "find_project_config",
    "find_global_config",
    "validate_config",
    "ConfigValidationWarning",
]
