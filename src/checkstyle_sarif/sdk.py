# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding checkstyle-sarif in other tools.

Usage::

    from checkstyle_sarif import convert_checkstyle_to_sarif

    xml = Path("checkstyle-result.xml").read_text(encoding="utf-8")
    Path("results.sarif").write_text(convert_checkstyle_to_sarif(xml), encoding="utf-8")
"""

from __future__ import annotations

import logging

from checkstyle_sarif.converter.sarif import convert_to_sarif
from checkstyle_sarif.formatters.sarif import format_sarif
from checkstyle_sarif.parsers.checkstyle_parser import parse_checkstyle_xml

logger = logging.getLogger("checkstyle_sarif.sdk")


def convert_checkstyle_to_sarif(
    xml_content: str,
    indent: int | None = 2,
    *,
    tool_version: str | None = None,
) -> str:
    """Convert Checkstyle XML text to SARIF 2.1.0 JSON text.

    Parameters
    ----------
    xml_content:
        Raw XML of a Checkstyle report.
    indent:
        JSON indentation width; 0 or None gives compact output.
    tool_version:
        Optional override for ``tool.driver.version``.

    Raises
    ------
    ParseError
        If the XML is empty, malformed, or not a Checkstyle report.
    """
    report = parse_checkstyle_xml(xml_content)
    log = convert_to_sarif(report, tool_version=tool_version)
    logger.debug("Serializing SARIF log (indent=%s)", indent)
    return format_sarif(log, indent=indent)
