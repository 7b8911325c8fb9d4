from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from .errors import IncompleteConfigError, MissingConfigFileError

logger = logging.getLogger(__name__)

APP_NAME = "video_batch_summary"
CONFIG_FILENAME = "config"
PROMPTS_DIRNAME = "prompts"

DEFAULT_LANGUAGE = "en"

# Written verbatim on first run.
DEFAULT_SETTINGS: dict[str, str] = {
    "TRANSCRIPTION_URL": "https://api.openai.com/v1/audio/transcriptions",
    "TRANSCRIPTION_MODEL": "whisper-1",
    "SUMMARY_MODEL": "gpt-4o-mini",
}
REQUIRED_KEYS = tuple(DEFAULT_SETTINGS)


@dataclass(frozen=True)
class Config:
    """Settings loaded once per run and passed to each stage."""

    transcription_url: str
    transcription_model: str
    summary_model: str
    language: str = DEFAULT_LANGUAGE


@dataclass(frozen=True)
class Paths:
    """On-disk layout for persisted state."""

    config_dir: Path
    work_dir: Path

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    @property
    def prompts_dir(self) -> Path:
        return self.config_dir / PROMPTS_DIRNAME

    @classmethod
    def default(cls, *, config_dir: Path | str | None = None, work_dir: Path | str | None = None) -> "Paths":
        return cls(
            config_dir=Path(config_dir) if config_dir is not None else _xdg_dir("XDG_CONFIG_HOME", ".config"),
            work_dir=Path(work_dir) if work_dir is not None else _xdg_dir("XDG_CACHE_HOME", ".cache") / "tmp",
        )


def _xdg_dir(env_var: str, fallback: str) -> Path:
    base_dir = os.getenv(env_var)
    if base_dir:
        base = Path(base_dir)
    else:
        base = Path.home() / fallback
    return base / APP_NAME


def write_default_config(path: Path | str) -> Path:
    target = Path(path)
    lines = [f"{key}={value}" for key, value in DEFAULT_SETTINGS.items()]
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("\n".join(lines) + "\n")
    except OSError as exc:
        raise MissingConfigFileError(f"Could not create config file {target}: {exc}") from exc
    logger.info("Created default config at %s", target)
    return target


def load_config(path: Path | str) -> Config:
    """Load settings from a flat ``KEY=value`` file, creating defaults if absent.

    Raises:
        MissingConfigFileError: The file cannot be created or read.
        IncompleteConfigError: A required key is empty after loading.
    """

    config_path = Path(path)
    if not config_path.exists():
        write_default_config(config_path)

    if not config_path.is_file():
        raise MissingConfigFileError(f"Config file not found: {config_path}")

    try:
        values = dotenv_values(config_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise MissingConfigFileError(f"Could not read config file {config_path}: {exc}") from exc

    settings = {key: (value or "").strip() for key, value in values.items()}
    empty = [key for key in REQUIRED_KEYS if not settings.get(key)]
    if empty:
        raise IncompleteConfigError(empty, path=config_path)

    return Config(
        transcription_url=settings["TRANSCRIPTION_URL"],
        transcription_model=settings["TRANSCRIPTION_MODEL"],
        summary_model=settings["SUMMARY_MODEL"],
        language=settings.get("LANGUAGE") or DEFAULT_LANGUAGE,
    )
