# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Projection of Checkstyle reports onto SARIF."""

from checkstyle_sarif.converter.sarif import (
    convert_to_sarif,
    extract_rule_id,
    map_severity_to_level,
    path_to_uri,
)

__all__ = [
    "convert_to_sarif",
    "extract_rule_id",
    "map_severity_to_level",
    "path_to_uri",
]
