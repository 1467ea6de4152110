# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 JSON formatter."""

from __future__ import annotations

import json
from typing import Any

from checkstyle_sarif.models.sarif import SarifLog


def sarif_to_dict(log: SarifLog) -> dict[str, Any]:
    """Return the SARIF log as plain JSON data, without unset optional members."""
    return log.model_dump(mode="json", by_alias=True, exclude_none=True)


def format_sarif(log: SarifLog, indent: int | None = 2) -> str:
    """Return SARIF JSON string.

    An ``indent`` of 0 or None produces compact single-line output.
    """
    data = sarif_to_dict(log)
    if not indent:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=indent, ensure_ascii=False)
