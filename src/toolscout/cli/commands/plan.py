"""Plan command implementation.

Prints the command lines an agent should run to bootstrap a checkout or to
verify a change, built for the detected package manager and hook system.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from toolscout.config.models import ToolscoutConfig

from toolscout.cli.commands import Command
from toolscout.cli.commands.detect import resolve_environment
from toolscout.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from toolscout.generation import CommandBuilder, PlannedCommand


class PlanCommand(Command):
    """Prints bootstrap and verification command plans."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "plan"

    def execute(self, args: Namespace, config: "ToolscoutConfig | None" = None) -> int:
        """Execute the plan command.

        Args:
            args: Parsed command-line arguments.
            config: Optional toolscout configuration carrying overrides.

        Returns:
            Exit code.
        """
        environment = resolve_environment(Path(args.path).resolve(), config)
        if environment is None:
            return EXIT_INVALID_USAGE

        builder = CommandBuilder(environment)
        only = getattr(args, "only", "all")

        sections = []
        if only in ("bootstrap", "all"):
            sections.append(("Bootstrap", builder.bootstrap_plan()))
        if only in ("verify", "all"):
            sections.append(("Verify", builder.verification_plan()))

        for index, (title, plan) in enumerate(sections):
            if index:
                print()
            self._print_plan(title, plan)

        return EXIT_SUCCESS

    def _print_plan(self, title: str, plan: List[PlannedCommand]) -> None:
        print(f"{title}:")
        for step, command in enumerate(plan, start=1):
            print(f"  {step}. {command.description}")
            print(f"     $ {command}")
