"""Bridge between CLI arguments and configuration models."""

from __future__ import annotations

import argparse
from typing import Any, Dict

from toolscout.config.models import ToolscoutConfig
from toolscout.core.models import parse_hook_system, parse_package_manager
from toolscout.detection import EnvironmentDetector


class ConfigBridge:
    """Translates CLI arguments to configuration objects."""

    @staticmethod
    def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
        """Convert CLI arguments to config override dict.

        Only explicitly provided flags are included. Uses getattr with
        defaults because not every subcommand defines every flag.

        Args:
            args: Parsed CLI arguments.

        Returns:
            Dictionary of config overrides.
        """
        overrides: Dict[str, Any] = {}

        package_manager = getattr(args, "package_manager", None)
        if package_manager:
            overrides["package_manager"] = package_manager

        hook_system = getattr(args, "hook_system", None)
        if hook_system:
            overrides["hook_system"] = hook_system

        sync: Dict[str, Any] = {}
        source = getattr(args, "source", None)
        if source:
            sync["source"] = source
        targets = getattr(args, "targets", None)
        if targets:
            sync["targets"] = list(targets)
        exclude = getattr(args, "exclude", None)
        if exclude:
            sync["exclude"] = list(exclude)
        if sync:
            overrides["sync"] = sync

        return overrides

    @staticmethod
    def build_detector(config: ToolscoutConfig) -> EnvironmentDetector:
        """Create an EnvironmentDetector honoring configured overrides.

        Raises:
            ValueError: If an override names an unknown tool.
        """
        return EnvironmentDetector(
            package_manager=parse_package_manager(config.package_manager),
            hook_system=parse_hook_system(config.hook_system),
        )
