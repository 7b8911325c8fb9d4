from __future__ import annotations

import logging
from pathlib import Path

from .errors import PromptNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_PROMPT_NAME = "summarize"
PROMPT_SUFFIX = ".txt"

DEFAULT_PROMPT_TEXT = (
    "You are an expert editor. You will receive the raw transcript of a video.\n\n"
    "Write a concise summary of it:\n"
    "  - Start with a one-paragraph overview of the main topic.\n"
    "  - List the key points as bullet points, keeping the supporting reasoning and examples.\n"
    "  - Finish with any decisions, action items or open questions that were mentioned.\n\n"
    "Do not add opinions that are not in the transcript and do not include any preamble.\n"
)


def prompt_path(name: str, prompts_dir: Path | str) -> Path:
    filename = name if name.endswith(PROMPT_SUFFIX) else f"{name}{PROMPT_SUFFIX}"
    return Path(prompts_dir) / filename


def ensure_default_prompt(prompts_dir: Path | str) -> Path:
    """Create the ``summarize`` prompt on first run and return its path."""

    target = prompt_path(DEFAULT_PROMPT_NAME, prompts_dir)
    if not target.exists():
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(DEFAULT_PROMPT_TEXT)
        logger.info("Created default prompt at %s", target)
    return target


def resolve_prompt(name: str | None, prompts_dir: Path | str) -> Path:
    """Return the file for prompt ``name``.

    The default prompt is created first regardless of ``name``.

    Raises:
        PromptNotFoundError: No file exists for ``name``.
    """

    ensure_default_prompt(prompts_dir)
    prompt_name = name or DEFAULT_PROMPT_NAME

    if "/" in prompt_name or "\\" in prompt_name or prompt_name.startswith("."):
        raise PromptNotFoundError(f"Prompt not found: {prompt_name}")

    target = prompt_path(prompt_name, prompts_dir)
    if not target.is_file():
        available = ", ".join(list_prompts(prompts_dir)) or "none"
        raise PromptNotFoundError(f"Prompt not found: {prompt_name} (available: {available})")
    return target


def list_prompts(prompts_dir: Path | str) -> list[str]:
    directory = Path(prompts_dir)
    if not directory.is_dir():
        return []
    return sorted(path.stem for path in directory.glob(f"*{PROMPT_SUFFIX}") if path.is_file())
