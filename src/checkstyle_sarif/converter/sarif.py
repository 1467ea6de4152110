# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Convert a CheckstyleReport to a SARIF 2.1.0 log."""

from __future__ import annotations

import logging
import re

from checkstyle_sarif.core.constants import (
    RULE_HELP_URI_TEMPLATE,
    SEVERITY_TO_SARIF_LEVEL,
    UNKNOWN_RULE_ID,
    SarifLevel,
)
from checkstyle_sarif.models.checkstyle import CheckstyleError, CheckstyleReport
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

logger = logging.getLogger("checkstyle_sarif.converter")

_WINDOWS_DRIVE_RE = re.compile(r"^[a-zA-Z]:/")


def map_severity_to_level(severity: str) -> SarifLevel:
    """Map a Checkstyle severity to a SARIF result level, defaulting to warning."""
    return SEVERITY_TO_SARIF_LEVEL.get(severity, SarifLevel.WARNING)


def path_to_uri(file_path: str) -> str:
    """Turn a report file name into a SARIF artifact URI.

    Backslashes become forward slashes and absolute paths gain a
    ``file://`` scheme. Relative paths are returned as-is so consumers
    can resolve them against their own base URI.
    """
    normalized = file_path.replace("\\", "/")
    if _WINDOWS_DRIVE_RE.match(normalized):
        return f"file:///{normalized}"
    if normalized.startswith("/"):
        return f"file://{normalized}"
    return normalized


def extract_rule_id(source: str) -> str:
    """Return the last dotted segment of a check's class name.

    e.g. ``com.puppycrawl.tools.checkstyle.checks.coding.FallThroughCheck``
    gives ``FallThroughCheck``.
    """
    segments = [s for s in source.split(".") if s]
    if not segments:
        return UNKNOWN_RULE_ID
    return segments[-1]


def _build_rule(rule_id: str, source: str) -> SarifRule:
    help_uri = RULE_HELP_URI_TEMPLATE.format(rule=rule_id.lower()) if source else None
    return SarifRule(id=rule_id, helpUri=help_uri)


def _build_region(error: CheckstyleError) -> SarifRegion:
    if error.column is not None and error.column > 0:
        return SarifRegion(startLine=error.line, startColumn=error.column)
    return SarifRegion(startLine=error.line)


def convert_to_sarif(report: CheckstyleReport, tool_version: str | None = None) -> SarifLog:
    """Convert a CheckstyleReport to a single-run SARIF log.

    Results are emitted file by file, in error order within each file.
    Rules are deduplicated on the derived rule id; the first occurrence
    wins and ``ruleIndex`` points at its position in ``rules``.

    Parameters
    ----------
    report:
        The parsed Checkstyle report.
    tool_version:
        Overrides the report's own version for ``tool.driver.version``.
        When neither is set the key is omitted.
    """
    rule_index: dict[str, int] = {}
    rules: list[SarifRule] = []
    results: list[SarifResult] = []

    for checkstyle_file in report.file:
        uri = path_to_uri(checkstyle_file.name)

        for error in checkstyle_file.error:
            rule_id = extract_rule_id(error.source)

            if rule_id not in rule_index:
                rule_index[rule_id] = len(rules)
                rules.append(_build_rule(rule_id, error.source))

            results.append(
                SarifResult(
                    ruleId=rule_id,
                    ruleIndex=rule_index[rule_id],
                    level=map_severity_to_level(error.severity),
                    message=SarifMessage(text=error.message),
                    locations=[
                        SarifLocation(
                            physicalLocation=SarifPhysicalLocation(
                                artifactLocation=SarifArtifactLocation(uri=uri),
                                region=_build_region(error),
                            )
                        )
                    ],
                )
            )

    # An empty string never reaches the output as a version
    version = tool_version or report.version or None
    driver = SarifDriver(version=version, rules=rules or None)

    logger.debug(
        "Converted %d files into %d results across %d rules",
        len(report.file),
        len(results),
        len(rules),
    )
    return SarifLog(runs=[SarifRun(tool=SarifTool(driver=driver), results=results)])
