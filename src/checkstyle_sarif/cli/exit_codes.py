# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Process exit codes for the checkstyle-to-sarif command.

Exit codes:
    0 - SUCCESS: SARIF was written
    1 - FAILURE: any input, conversion or output error
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by checkstyle-to-sarif."""

    SUCCESS = 0
    FAILURE = 1
