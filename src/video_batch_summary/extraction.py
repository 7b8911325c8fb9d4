from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import json_repair

from .errors import TextExtractionError


def extract_text(transcript_path: Path | str, *, field: str = "text") -> str:
    """Return the ``text`` field of a persisted transcription response.

    The value is returned as a plain string, without JSON quoting.
    """

    path = Path(transcript_path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TextExtractionError(f"Could not read transcription {path}") from exc

    payload = _parse_payload(raw)
    if payload is None:
        raise TextExtractionError(f"Transcription {path.name} is not a JSON object")

    value = payload.get(field)
    if not isinstance(value, str):
        error = payload.get("error")
        if isinstance(error, dict):
            error = error.get("message")
        detail = f": {error}" if error else ""
        raise TextExtractionError(f"Transcription {path.name} has no '{field}' field{detail}")
    return value


def _parse_payload(raw: str) -> dict[str, Any] | None:
    try:
        loaded = json.loads(raw)
    except json.JSONDecodeError:
        try:
            loaded = json_repair.loads(raw)
        except Exception:  # noqa: BLE001 - json_repair raises assorted errors on garbage
            return None
    return loaded if isinstance(loaded, dict) else None
