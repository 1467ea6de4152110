# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Checkstyle XML parsing utilities."""

from checkstyle_sarif.parsers.checkstyle_parser import build_tree, parse_checkstyle_xml

__all__ = [
    "build_tree",
    "parse_checkstyle_xml",
]
