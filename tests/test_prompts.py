from __future__ import annotations

from pathlib import Path

import pytest

from video_batch_summary.errors import PromptNotFoundError
from video_batch_summary.prompts import DEFAULT_PROMPT_TEXT, list_prompts, resolve_prompt


def test_resolve_default_prompt_creates_it(tmp_path: Path) -> None:
    prompts_dir = tmp_path / "prompts"

    path = resolve_prompt(None, prompts_dir)

    assert path == prompts_dir / "summarize.txt"
    assert path.read_text() == DEFAULT_PROMPT_TEXT


def test_resolve_named_prompt(tmp_path: Path) -> None:
    prompts_dir = tmp_path / "prompts"
    prompts_dir.mkdir()
    (prompts_dir / "action-items.txt").write_text("List the action items.")

    assert resolve_prompt("action-items", prompts_dir) == prompts_dir / "action-items.txt"
    assert resolve_prompt("action-items.txt", prompts_dir) == prompts_dir / "action-items.txt"


def test_resolve_missing_prompt_still_creates_default(tmp_path: Path) -> None:
    prompts_dir = tmp_path / "prompts"

    with pytest.raises(PromptNotFoundError, match="nonexistent"):
        resolve_prompt("nonexistent", prompts_dir)

    assert (prompts_dir / "summarize.txt").exists()


def test_resolve_does_not_overwrite_edited_default(tmp_path: Path) -> None:
    prompts_dir = tmp_path / "prompts"
    prompts_dir.mkdir()
    (prompts_dir / "summarize.txt").write_text("my own summary prompt")

    path = resolve_prompt("summarize", prompts_dir)

    assert path.read_text() == "my own summary prompt"


def test_resolve_rejects_path_traversal(tmp_path: Path) -> None:
    (tmp_path / "secret.txt").write_text("x")

    with pytest.raises(PromptNotFoundError):
        resolve_prompt("../secret", tmp_path / "prompts")


def test_list_prompts(tmp_path: Path) -> None:
    prompts_dir = tmp_path / "prompts"
    assert list_prompts(prompts_dir) == []

    prompts_dir.mkdir()
    (prompts_dir / "summarize.txt").write_text("a")
    (prompts_dir / "brief.txt").write_text("b")
    (prompts_dir / "notes.md").write_text("ignored")

    assert list_prompts(prompts_dir) == ["brief", "summarize"]
