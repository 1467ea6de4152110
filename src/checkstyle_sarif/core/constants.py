# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, severity mappings, and fixed SARIF literals."""

from enum import StrEnum


class CheckstyleSeverity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    IGNORE = "ignore"


class SarifLevel(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    NONE = "none"


# Lower-cased attribute values accepted by the parser
SEVERITY_ALIASES: dict[str, CheckstyleSeverity] = {
    "error": CheckstyleSeverity.ERROR,
    "warning": CheckstyleSeverity.WARNING,
    "warn": CheckstyleSeverity.WARNING,
    "info": CheckstyleSeverity.INFO,
    "ignore": CheckstyleSeverity.IGNORE,
}

SEVERITY_TO_SARIF_LEVEL: dict[CheckstyleSeverity, SarifLevel] = {
    CheckstyleSeverity.ERROR: SarifLevel.ERROR,
    CheckstyleSeverity.WARNING: SarifLevel.WARNING,
    CheckstyleSeverity.INFO: SarifLevel.NOTE,
    CheckstyleSeverity.IGNORE: SarifLevel.NONE,
}

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA_URI = (
    "https://docs.oasis-open.org/sarif/sarif/v2.1.0/cos02/schemas/sarif-schema-2.1.0.json"
)
SARIF_COLUMN_KIND = "utf16CodeUnits"

TOOL_NAME = "Checkstyle"
TOOL_INFORMATION_URI = "https://checkstyle.org"
RULE_HELP_URI_TEMPLATE = "https://checkstyle.org/checks/{rule}.html"
UNKNOWN_RULE_ID = "UnknownRule"
