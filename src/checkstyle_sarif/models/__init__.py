# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for checkstyle-sarif."""

from checkstyle_sarif.models.checkstyle import CheckstyleError, CheckstyleFile, CheckstyleReport
from checkstyle_sarif.models.sarif import (
    SarifArtifactLocation,
    SarifDriver,
    SarifLocation,
    SarifLog,
    SarifMessage,
    SarifPhysicalLocation,
    SarifRegion,
    SarifResult,
    SarifRule,
    SarifRun,
    SarifTool,
)

__all__ = [
    "CheckstyleError",
    "CheckstyleFile",
    "CheckstyleReport",
    "SarifArtifactLocation",
    "SarifDriver",
    "SarifLocation",
    "SarifLog",
    "SarifMessage",
    "SarifPhysicalLocation",
    "SarifRegion",
    "SarifResult",
    "SarifRule",
    "SarifRun",
    "SarifTool",
]
