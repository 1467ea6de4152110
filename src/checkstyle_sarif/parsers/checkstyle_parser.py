# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Parse Checkstyle XML reports into CheckstyleReport objects."""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET
from typing import Any

from checkstyle_sarif.core.constants import SEVERITY_ALIASES, CheckstyleSeverity
from checkstyle_sarif.core.exceptions import ParseError
from checkstyle_sarif.models.checkstyle import CheckstyleError, CheckstyleFile, CheckstyleReport

logger = logging.getLogger("checkstyle_sarif.parser")

ROOT_ELEMENT = "checkstyle"

# Elements that always become lists in the tree, even when they occur
# once or not at all.
ARRAY_ELEMENTS = frozenset({"file", "error"})

ATTRIBUTE_PREFIX = "@"

Node = dict[str, Any] | str


def _build_node(element: ET.Element) -> Node:
    children = list(element)
    if not element.attrib and not children:
        return (element.text or "").strip()

    node: dict[str, Any] = {
        f"{ATTRIBUTE_PREFIX}{key}": value for key, value in element.attrib.items()
    }
    for child in children:
        value = _build_node(child)
        if child.tag in ARRAY_ELEMENTS:
            node.setdefault(child.tag, []).append(value)
        elif child.tag in node:
            existing = node[child.tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                node[child.tag] = [existing, value]
        else:
            node[child.tag] = value
    return node


def build_tree(root: ET.Element) -> dict[str, Node]:
    """Convert an element tree into nested dicts keyed by tag name.

    Attributes are stored under ``@name`` keys. Tags listed in
    ``ARRAY_ELEMENTS`` are always collected into lists; other repeated
    tags become lists only when they repeat. Elements with neither
    attributes nor children collapse to their stripped text.
    """
    return {root.tag: _build_node(root)}


def _to_int(raw: object) -> int | None:
    """Parse a base-10 attribute value, returning None if it is not a number."""
    if raw is None:
        return None
    text = str(raw).strip()
    try:
        return int(text, 10)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or not value.is_integer():
        return None
    return int(value)


def _normalize_severity(raw: object) -> CheckstyleSeverity:
    if raw is None:
        return CheckstyleSeverity.WARNING
    return SEVERITY_ALIASES.get(str(raw).strip().lower(), CheckstyleSeverity.WARNING)


def _build_error(raw: dict[str, Any]) -> CheckstyleError:
    line = _to_int(raw.get("@line"))
    if line is None or line < 1:
        line = 1

    return CheckstyleError(
        line=line,
        column=_to_int(raw.get("@column")),
        severity=_normalize_severity(raw.get("@severity")),
        message=str(raw.get("@message", "")),
        source=str(raw.get("@source", "")),
    )


def _build_file(raw: Node) -> CheckstyleFile:
    if not isinstance(raw, dict):
        # <file/> without attributes or children
        return CheckstyleFile()

    errors = [e for e in raw.get("error", []) if isinstance(e, dict)]
    return CheckstyleFile(
        name=str(raw.get("@name", "")),
        error=[_build_error(e) for e in errors],
    )


def parse_checkstyle_xml(xml_content: str) -> CheckstyleReport:
    """Parse a Checkstyle XML document into a CheckstyleReport.

    Parameters
    ----------
    xml_content:
        The raw XML text of a Checkstyle report.

    Returns
    -------
    CheckstyleReport with files and errors in document order.

    Raises
    ------
    ParseError
        If the input is empty, is not well-formed XML, or its root element
        is not ``<checkstyle>``.
    """
    if not xml_content or not xml_content.strip():
        raise ParseError("Input XML content is empty")

    try:
        root = ET.fromstring(xml_content.lstrip("\ufeff"))
    except ET.ParseError as exc:
        raise ParseError(f"Failed to parse XML: {exc}") from exc

    tree = build_tree(root)
    if ROOT_ELEMENT not in tree:
        raise ParseError("Invalid Checkstyle XML: missing root <checkstyle> element")

    checkstyle = tree[ROOT_ELEMENT]
    if not isinstance(checkstyle, dict):
        checkstyle = {}

    version = checkstyle.get("@version")
    report = CheckstyleReport(
        version=str(version) if version is not None else None,
        file=[_build_file(f) for f in checkstyle.get("file", [])],
    )
    logger.debug(
        "Parsed Checkstyle report: %d files, %d errors",
        len(report.file),
        report.error_count,
    )
    return report
