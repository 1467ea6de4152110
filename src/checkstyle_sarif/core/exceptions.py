# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for checkstyle-sarif."""


class CheckstyleSarifError(Exception):
    """Base exception for all checkstyle-sarif errors."""


class ConfigurationError(CheckstyleSarifError):
    """Invalid or missing configuration."""


class ParseError(CheckstyleSarifError):
    """Failed to parse a Checkstyle XML report."""


class InputError(CheckstyleSarifError):
    """Failed to read the report from a file or stream."""


class OutputError(CheckstyleSarifError):
    """Failed to write the SARIF log."""
