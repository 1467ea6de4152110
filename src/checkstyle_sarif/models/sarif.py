# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 output models.

Optional members default to ``None`` and are dropped on serialization,
see :func:`checkstyle_sarif.formatters.sarif.sarif_to_dict`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from checkstyle_sarif.core.constants import (
    SARIF_COLUMN_KIND,
    SARIF_SCHEMA_URI,
    SARIF_VERSION,
    TOOL_INFORMATION_URI,
    TOOL_NAME,
    SarifLevel,
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SarifMessage(_Frozen):
    text: str


class SarifArtifactLocation(_Frozen):
    uri: str


class SarifRegion(_Frozen):
    startLine: int = Field(ge=1)
    startColumn: int | None = Field(default=None, ge=1)


class SarifPhysicalLocation(_Frozen):
    artifactLocation: SarifArtifactLocation
    region: SarifRegion


class SarifLocation(_Frozen):
    physicalLocation: SarifPhysicalLocation


class SarifRule(_Frozen):
    id: str
    helpUri: str | None = None


class SarifDriver(_Frozen):
    name: str = TOOL_NAME
    version: str | None = None
    informationUri: str = TOOL_INFORMATION_URI
    rules: list[SarifRule] | None = None


class SarifTool(_Frozen):
    driver: SarifDriver = Field(default_factory=SarifDriver)


class SarifResult(_Frozen):
    ruleId: str
    ruleIndex: int = Field(ge=0)
    level: SarifLevel = SarifLevel.WARNING
    message: SarifMessage
    locations: list[SarifLocation] = Field(default_factory=list)


class SarifRun(_Frozen):
    tool: SarifTool = Field(default_factory=SarifTool)
    results: list[SarifResult] = Field(default_factory=list)
    columnKind: str = SARIF_COLUMN_KIND


class SarifLog(_Frozen):
    version: str = SARIF_VERSION
    schema_uri: str = Field(default=SARIF_SCHEMA_URI, alias="$schema")
    runs: list[SarifRun] = Field(default_factory=list)
