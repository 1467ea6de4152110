# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""End-to-end tests: Checkstyle XML text through to SARIF JSON text."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from checkstyle_sarif import convert_checkstyle_to_sarif, convert_to_sarif, parse_checkstyle_xml
from checkstyle_sarif.formatters.sarif import sarif_to_dict

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures" / "checkstyle"
ALL_FIXTURES = sorted(FIXTURES_DIR.glob("*.xml"))

VALID_LEVELS = {"error", "warning", "note", "none"}


def _load(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_sarif_shape(sarif: dict) -> None:
    """Check the members a SARIF 2.1.0 consumer relies on."""
    assert sarif["version"] == "2.1.0"
    assert sarif["$schema"].endswith("sarif-schema-2.1.0.json")
    assert isinstance(sarif["runs"], list) and len(sarif["runs"]) == 1

    run = sarif["runs"][0]
    driver = run["tool"]["driver"]
    assert run["columnKind"] in ("utf16CodeUnits", "unicodeCodePoints")
    assert isinstance(driver["name"], str)
    if "version" in driver:
        assert isinstance(driver["version"], str) and driver["version"]
    rules = driver.get("rules", [])
    assert all(isinstance(rule["id"], str) for rule in rules)

    for result in run["results"]:
        assert isinstance(result["message"]["text"], str)
        assert result["level"] in VALID_LEVELS
        assert 0 <= result["ruleIndex"] < len(rules)
        assert rules[result["ruleIndex"]]["id"] == result["ruleId"]
        assert len(result["locations"]) == 1
        physical = result["locations"][0]["physicalLocation"]
        assert isinstance(physical["artifactLocation"]["uri"], str)
        region = physical["region"]
        assert region["startLine"] >= 1
        if "startColumn" in region:
            assert region["startColumn"] >= 1
        assert None not in region.values()


@pytest.mark.parametrize("fixture", ALL_FIXTURES, ids=lambda p: p.name)
class TestFixtureCompliance:
    def test_sarif_shape(self, fixture: Path) -> None:
        _assert_sarif_shape(json.loads(convert_checkstyle_to_sarif(_load(fixture))))

    def test_result_count_matches_error_elements(self, fixture: Path) -> None:
        xml = _load(fixture)
        expected = len(ET.fromstring(xml.encode("utf-8")).findall("./file/error"))

        sarif = json.loads(convert_checkstyle_to_sarif(xml))
        assert len(sarif["runs"][0]["results"]) == expected

    def test_rules_are_distinct_rule_ids(self, fixture: Path) -> None:
        sarif = json.loads(convert_checkstyle_to_sarif(_load(fixture)))
        run = sarif["runs"][0]
        distinct = list(dict.fromkeys(r["ruleId"] for r in run["results"]))

        assert [r["id"] for r in run["tool"]["driver"].get("rules", [])] == distinct

    def test_idempotent(self, fixture: Path) -> None:
        xml = _load(fixture)
        assert convert_checkstyle_to_sarif(xml) == convert_checkstyle_to_sarif(xml)


class TestValidReport:
    def test_results_in_file_then_error_order(self) -> None:
        sarif = json.loads(convert_checkstyle_to_sarif(_load(FIXTURES_DIR / "valid-checkstyle.xml")))
        locations = [
            (
                r["locations"][0]["physicalLocation"]["artifactLocation"]["uri"],
                r["locations"][0]["physicalLocation"]["region"]["startLine"],
            )
            for r in sarif["runs"][0]["results"]
        ]
        assert locations == [
            ("file:///home/user/project/src/Main.java", 17),
            ("file:///home/user/project/src/Main.java", 23),
            ("file:///home/user/project/src/Main.java", 42),
            ("file:///home/user/project/src/Utils.java", 8),
            ("file:///home/user/project/src/Utils.java", 30),
            ("file:///home/user/project/src/Config.java", 3),
        ]

    def test_shared_rule_shares_index(self) -> None:
        sarif = json.loads(convert_checkstyle_to_sarif(_load(FIXTURES_DIR / "valid-checkstyle.xml")))
        results = sarif["runs"][0]["results"]

        fall_through = [r for r in results if r["ruleId"] == "FallThroughCheck"]
        assert len(fall_through) == 2
        assert {r["ruleIndex"] for r in fall_through} == {0}
        assert len(sarif["runs"][0]["tool"]["driver"]["rules"]) == 5

    def test_line_without_column(self) -> None:
        sarif = json.loads(convert_checkstyle_to_sarif(_load(FIXTURES_DIR / "valid-checkstyle.xml")))
        region = sarif["runs"][0]["results"][2]["locations"][0]["physicalLocation"]["region"]
        assert region == {"startLine": 42}


class TestSeverityRoundTrip:
    @pytest.mark.parametrize(
        ("severity", "level"),
        [
            ("error", "error"),
            ("warning", "warning"),
            ("info", "note"),
            ("ignore", "none"),
            ("Error", "error"),
            ("WARN", "warning"),
            ("IGNORE", "none"),
            ("catastrophic", "warning"),
        ],
    )
    def test_level(self, severity: str, level: str) -> None:
        xml = f'<checkstyle><file name="A.java"><error line="1" severity="{severity}"/></file></checkstyle>'
        sarif = json.loads(convert_checkstyle_to_sarif(xml))
        assert sarif["runs"][0]["results"][0]["level"] == level


class TestEdgeCases:
    def test_empty_report(self) -> None:
        sarif = json.loads(convert_checkstyle_to_sarif(_load(FIXTURES_DIR / "empty-checkstyle.xml")))
        run = sarif["runs"][0]

        assert run["results"] == []
        assert "rules" not in run["tool"]["driver"]

    def test_windows_and_relative_paths(self) -> None:
        sarif = json.loads(convert_checkstyle_to_sarif(_load(FIXTURES_DIR / "windows-paths.xml")))
        run = sarif["runs"][0]
        uris = [r["locations"][0]["physicalLocation"]["artifactLocation"]["uri"] for r in run["results"]]

        assert uris == ["file:///C:/Users/dev/project/src/Main.java", "file:///D:/work/Other.java"]
        assert "version" not in run["tool"]["driver"]
        assert [r["ruleIndex"] for r in run["results"]] == [0, 0]

    def test_empty_source_yields_unknown_rule(self) -> None:
        xml = '<checkstyle><file name="A.java"><error line="3" source=""/></file></checkstyle>'
        sarif = json.loads(convert_checkstyle_to_sarif(xml))
        assert sarif["runs"][0]["results"][0]["ruleId"] == "UnknownRule"

    def test_relative_path_unchanged(self) -> None:
        report = parse_checkstyle_xml('<checkstyle><file name="src/b.java"><error line="2"/></file></checkstyle>')
        data = sarif_to_dict(convert_to_sarif(report))
        location = data["runs"][0]["results"][0]["locations"][0]["physicalLocation"]
        assert location["artifactLocation"]["uri"] == "src/b.java"
