# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Intermediate model of a parsed Checkstyle XML report."""

from __future__ import annotations

from pydantic import BaseModel, Field

from checkstyle_sarif.core.constants import CheckstyleSeverity


class CheckstyleError(BaseModel):
    """A single violation reported against a file."""

    line: int = Field(default=1, ge=1, description="1-based line number")
    column: int | None = Field(default=None, description="1-based column, if reported")
    # Not limited to CheckstyleSeverity; hand-built reports may hold other values
    severity: str = CheckstyleSeverity.WARNING
    message: str = ""
    source: str = Field(default="", description="Fully qualified name of the check")


class CheckstyleFile(BaseModel):
    """A <file> element and its violations, in document order."""

    name: str = ""
    error: list[CheckstyleError] = Field(default_factory=list)


class CheckstyleReport(BaseModel):
    """Root <checkstyle> element."""

    version: str | None = None
    file: list[CheckstyleFile] = Field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(len(f.error) for f in self.file)
