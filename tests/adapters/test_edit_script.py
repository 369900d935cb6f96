from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tunesync.adapters.edit_script import (
    EditScriptError,
    parse_edit_script,
    read_edit_script,
)
from tunesync.domain.model import UpdateOrigin

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_edit_script_defaults() -> None:
    entries = parse_edit_script(['{"field": "name", "value": "ABR"}'])

    (entry,) = entries
    assert entry.target == ""
    assert entry.field == "name"
    assert entry.value == "ABR"
    assert entry.origin is UpdateOrigin.NETWORK


def test_parse_edit_script_skips_blank_lines() -> None:
    entries = parse_edit_script(
        [
            '{"target": "albums/0", "field": "release_year", "value": 2006, "origin": "ui"}',
            "",
            "   ",
            '{"target": "albums/0/tracks/1", "field": "duration", "value": 241}',
        ]
    )

    assert [entry.origin for entry in entries] == [
        UpdateOrigin.USER_INTERFACE,
        UpdateOrigin.NETWORK,
    ]


def test_parse_edit_script_names_the_bad_line() -> None:
    with pytest.raises(EditScriptError, match=r"script.jsonl:2: invalid edit entry"):
        parse_edit_script(
            ['{"field": "name", "value": "A"}', '{"value": "missing field"}'],
            source="script.jsonl",
        )


def test_parse_edit_script_rejects_unknown_origin() -> None:
    with pytest.raises(EditScriptError):
        parse_edit_script(['{"field": "name", "value": "A", "origin": "carrier-pigeon"}'])


def test_read_edit_script_from_file(tmp_path: Path) -> None:
    path = tmp_path / "edits.jsonl"
    path.write_text('{"field": "year_founded", "value": 2010}\n', encoding="utf-8")

    (entry,) = read_edit_script(path)

    assert entry.value == 2010


def test_read_edit_script_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(EditScriptError, match="Cannot read edit script"):
        read_edit_script(tmp_path / "missing.jsonl")
