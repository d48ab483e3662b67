"""Exit codes for the toolscout CLI.

- 0: Success
- 1: A requested operation failed (sync, changeset write)
- 3: Invalid usage (bad arguments, bad config, unknown override)
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_OPERATION_FAILED = 1
EXIT_INVALID_USAGE = 3
