"""Detect command implementation."""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from toolscout.config.models import ToolscoutConfig

from toolscout.cli.commands import Command
from toolscout.cli.config_bridge import ConfigBridge
from toolscout.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from toolscout.config.loader import get_default_config
from toolscout.core.logging import get_logger
from toolscout.core.models import (
    CATEGORY_HOOK_SYSTEM,
    CATEGORY_PACKAGE_MANAGER,
    ToolEnvironment,
)
from toolscout.detection import all_marker_names

LOGGER = get_logger(__name__)


def resolve_environment(
    project_root: Path,
    config: "ToolscoutConfig | None",
) -> Optional[ToolEnvironment]:
    """Detect the environment for a project, logging usage errors.

    Returns:
        ToolEnvironment, or None if the project root or an override is invalid.
    """
    if not project_root.is_dir():
        LOGGER.error(f"Not a directory: {project_root}")
        return None
    try:
        detector = ConfigBridge.build_detector(config or get_default_config())
    except ValueError as e:
        LOGGER.error(str(e))
        return None
    return detector.detect(project_root)


def present_markers(project_root: Path) -> List[str]:
    """Marker files present in the project root, in priority order."""
    return [name for name in all_marker_names() if (project_root / name).exists()]


class DetectCommand(Command):
    """Shows the detected package manager and hook system."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "detect"

    def execute(self, args: Namespace, config: "ToolscoutConfig | None" = None) -> int:
        """Execute the detect command.

        Args:
            args: Parsed command-line arguments.
            config: Optional toolscout configuration carrying overrides.

        Returns:
            Exit code.
        """
        project_root = Path(args.path).resolve()
        environment = resolve_environment(project_root, config)
        if environment is None:
            return EXIT_INVALID_USAGE

        markers = present_markers(environment.root)

        if getattr(args, "format", "text") == "json":
            data = environment.to_dict()
            data["markers"] = markers
            print(json.dumps(data, indent=2))
            return EXIT_SUCCESS

        self._print_text(environment, markers)
        return EXIT_SUCCESS

    def _print_text(self, environment: ToolEnvironment, markers: List[str]) -> None:
        def origin(category: str) -> str:
            return "override" if environment.is_overridden(category) else "detected"

        print(f"Project:         {environment.root}")
        print(
            f"Package manager: {environment.package_manager.value} "
            f"({origin(CATEGORY_PACKAGE_MANAGER)})"
        )
        print(
            f"Hook system:     {environment.hook_system.value} "
            f"({origin(CATEGORY_HOOK_SYSTEM)})"
        )
        print(f"Markers:         {', '.join(markers) if markers else '(none)'}")
