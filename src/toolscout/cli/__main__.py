"""Allow running the CLI with ``python -m toolscout.cli``."""

from toolscout.cli import main

raise SystemExit(main())
