from __future__ import annotations

from pathlib import Path

import pytest

from video_batch_summary.errors import TextExtractionError
from video_batch_summary.extraction import extract_text


def test_extract_text_returns_unquoted_string(tmp_path: Path) -> None:
    path = tmp_path / "meeting1.json"
    path.write_text('{"text": "Hello world", "language": "en"}')

    assert extract_text(path) == "Hello world"


def test_extract_text_keeps_unicode_and_newlines(tmp_path: Path) -> None:
    path = tmp_path / "talk.json"
    path.write_text('{"text": "Gr\\u00fc\\u00dfe\\nzweite Zeile"}', encoding="utf-8")

    assert extract_text(path) == "Grüße\nzweite Zeile"


def test_extract_text_repairs_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "talk.json"
    path.write_text('{"text": "Hello world",}')

    assert extract_text(path) == "Hello world"


def test_extract_text_reports_error_payload(tmp_path: Path) -> None:
    path = tmp_path / "talk.json"
    path.write_text('{"error": {"message": "Invalid API key"}}')

    with pytest.raises(TextExtractionError, match="Invalid API key"):
        extract_text(path)


def test_extract_text_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "talk.json"
    path.write_text('["not", "an", "object"]')

    with pytest.raises(TextExtractionError, match="not a JSON object"):
        extract_text(path)


def test_extract_text_missing_file(tmp_path: Path) -> None:
    with pytest.raises(TextExtractionError):
        extract_text(tmp_path / "missing.json")
