"""Command line construction from a detected environment.

Builds argv lists for the package manager, hook framework and changeset
CLI. Nothing here executes a command.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from toolscout.core.models import HookSystem, PackageManager, ToolEnvironment

# Well-known package.json scripts referenced by the workflow documents
SCRIPT_LEFTHOOK_INSTALL = "lefthook:install"
SCRIPT_RULER_APPLY = "ruler:apply"
SCRIPT_RULER_CHECK = "ruler:check"
SCRIPT_CHECK = "check"
SCRIPT_FORMAT = "format"
SCRIPT_LINT = "lint"
SCRIPT_TEST = "test"

KNOWN_SCRIPTS = (
    SCRIPT_LEFTHOOK_INSTALL,
    SCRIPT_RULER_APPLY,
    SCRIPT_RULER_CHECK,
    SCRIPT_CHECK,
    SCRIPT_FORMAT,
    SCRIPT_LINT,
    SCRIPT_TEST,
)

VERIFICATION_SCRIPTS = (
    SCRIPT_RULER_CHECK,
    SCRIPT_CHECK,
    SCRIPT_FORMAT,
    SCRIPT_LINT,
    SCRIPT_TEST,
)

# How each package manager runs a binary from node_modules
PACKAGE_RUNNERS: Dict[PackageManager, List[str]] = {
    PackageManager.BUN: ["bunx"],
    PackageManager.PNPM: ["pnpm", "exec"],
    PackageManager.YARN: ["yarn"],
    PackageManager.NPM: ["npx"],
}

CHANGESET_BINARY = "changeset"


@dataclass(frozen=True)
class PlannedCommand:
    """A command line with a short description of its purpose."""

    description: str
    argv: List[str]

    def __str__(self) -> str:
        return format_command(self.argv)


def format_command(argv: Sequence[str]) -> str:
    """Join argv into a single shell-safe string."""
    return shlex.join(list(argv))


class CommandBuilder:
    """Builds command lines for a resolved ToolEnvironment."""

    def __init__(self, environment: ToolEnvironment):
        """Initialize CommandBuilder.

        Args:
            environment: Resolved tool choices for the project.
        """
        self._environment = environment

    @property
    def environment(self) -> ToolEnvironment:
        """The environment commands are built for."""
        return self._environment

    @property
    def package_manager(self) -> str:
        """Package manager binary name."""
        return self._environment.package_manager.value

    def install(self) -> List[str]:
        """Install project dependencies."""
        return [self.package_manager, "install"]

    def run(self, script: str, *args: str) -> List[str]:
        """Run a package.json script.

        Args:
            script: Script name, e.g. ``"lint"``.
            args: Extra arguments forwarded to the script.

        Returns:
            Command argv.

        Raises:
            ValueError: If the script name is empty.
        """
        if not script:
            raise ValueError("Script name must not be empty")
        argv = [self.package_manager, "run", script]
        if args:
            # npm and pnpm need "--" to forward flags to the script
            if self._environment.package_manager in (PackageManager.NPM, PackageManager.PNPM):
                argv.append("--")
            argv.extend(args)
        return argv

    def exec(self, tool: str, *args: str) -> List[str]:
        """Run a binary installed in node_modules through the package runner."""
        return PACKAGE_RUNNERS[self._environment.package_manager] + [tool, *args]

    def hook_install(self) -> Optional[List[str]]:
        """Install git hooks for the detected hook framework.

        Returns:
            Command argv, or None when no hook framework is in use.
        """
        hook_system = self._environment.hook_system
        if hook_system == HookSystem.LEFTHOOK:
            return self.run(SCRIPT_LEFTHOOK_INSTALL)
        if hook_system == HookSystem.PRE_COMMIT:
            return ["pre-commit", "install"]
        return None

    def changeset_add(self) -> List[str]:
        """Create a changeset entry with the changeset CLI."""
        return self.exec(CHANGESET_BINARY, "add")

    def changeset_version(self) -> List[str]:
        """Consume pending changesets and bump package versions."""
        return self.exec(CHANGESET_BINARY, "version")

    def bootstrap_plan(self) -> List[PlannedCommand]:
        """Commands to bootstrap a fresh checkout, in order."""
        plan = [PlannedCommand("Install dependencies", self.install())]
        hook_install = self.hook_install()
        if hook_install is not None:
            plan.append(
                PlannedCommand(f"Install {self._environment.hook_system.value} hooks", hook_install)
            )
        plan.append(PlannedCommand("Apply agent rules", self.run(SCRIPT_RULER_APPLY)))
        return plan

    def verification_plan(self) -> List[PlannedCommand]:
        """Commands to verify a change before committing, in order."""
        descriptions = {
            SCRIPT_RULER_CHECK: "Check agent rules are up to date",
            SCRIPT_CHECK: "Run project checks",
            SCRIPT_FORMAT: "Format code",
            SCRIPT_LINT: "Lint code",
            SCRIPT_TEST: "Run tests",
        }
        return [PlannedCommand(descriptions[script], self.run(script)) for script in VERIFICATION_SCRIPTS]
