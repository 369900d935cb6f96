"""Edit scripts: JSON lines of field updates, one per line.

Example line::

    {"target": "albums/0", "field": "title", "value": "Thrill Seeker (Remaster)"}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import JsonValue, ValidationError

from tunesync.adapters._base import PayloadModel
from tunesync.domain.model import UpdateOrigin

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


class EditScriptError(ValueError):
    """Raised when an edit script line is not a valid entry."""


class EditScriptEntry(PayloadModel):
    target: str = ""
    field: str
    value: JsonValue
    origin: UpdateOrigin = UpdateOrigin.NETWORK


def parse_edit_script(lines: list[str], *, source: str = "<script>") -> list[EditScriptEntry]:
    entries: list[EditScriptEntry] = []
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            entries.append(EditScriptEntry.model_validate_json(line))
        except ValidationError as exc:
            raise EditScriptError(f"{source}:{number}: invalid edit entry: {exc}") from exc
    log.debug("Parsed %s edit entries from %s", len(entries), source)
    return entries


def read_edit_script(path: Path) -> list[EditScriptEntry]:
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise EditScriptError(f"Cannot read edit script {path}: {exc}") from exc
    return parse_edit_script(lines, source=str(path))
