# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""checkstyle-sarif - Convert Checkstyle XML reports to SARIF 2.1.0."""

__version__ = "0.1.0"

from checkstyle_sarif.converter.sarif import convert_to_sarif
from checkstyle_sarif.core.exceptions import CheckstyleSarifError, ParseError
from checkstyle_sarif.parsers.checkstyle_parser import parse_checkstyle_xml
from checkstyle_sarif.sdk import convert_checkstyle_to_sarif

__all__ = [
    "CheckstyleSarifError",
    "ParseError",
    "__version__",
    "convert_checkstyle_to_sarif",
    "convert_to_sarif",
    "parse_checkstyle_xml",
]
